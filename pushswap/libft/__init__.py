"""Character, memory, string, output and linked-list helpers."""