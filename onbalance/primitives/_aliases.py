Timestamp = int
