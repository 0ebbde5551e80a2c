"""Character, string, memory, linked-list, output and line-reading helpers."""