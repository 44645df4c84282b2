"""MapReduce coordinator, worker helpers and a sequential runner."""