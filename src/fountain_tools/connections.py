from importlib import resources
from functools import cache

class WhitespaceDataSource:
    @staticmethod
    @cache
    def yaml_path():
        """ Named whitespace profiles """
        return resources.files('fountain_tools.data').joinpath('whitespace.yaml')
