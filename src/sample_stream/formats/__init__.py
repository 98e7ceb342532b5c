from .file_to_string import FileToStringStream, SampleFile, read_file

__all__ = [
    "FileToStringStream",
    "SampleFile",
    "read_file",
]
