"""
Exceptions raised by the order domain and its CSV repositories
"""


class OrderDomainError(Exception):
    """Base exception"""
    pass


class InvalidArgumentError(OrderDomainError, ValueError):
    """Illegal constructor or mutator argument (bad status, duplicate or missing product)"""
    pass


class StorageError(OrderDomainError):
    """Storage file missing, unreadable, unwritable or structurally malformed"""
    pass


class DataIntegrityError(OrderDomainError):
    """Well-formed row that references an unknown customer or carries an unknown status"""
    pass
