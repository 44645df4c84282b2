"""Map and reduce applications for the MapReduce framework."""