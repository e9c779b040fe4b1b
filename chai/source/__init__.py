'''Chai Source File Access'''


from .reader import SourceReader
