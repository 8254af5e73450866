"""
Copyright (c) 2023 Aiven Ltd
See LICENSE for details
"""


class InvalidConfiguration(Exception):
    pass


class InvalidRegistry(Exception):
    pass
