"""Message types of the single-server key/value service."""