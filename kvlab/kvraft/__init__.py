"""Message types and error codes of the replicated key/value service."""