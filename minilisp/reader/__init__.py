from minilisp.reader.parser import Reader, CharStream, read_all

__all__ = ["Reader", "CharStream", "read_all"]
