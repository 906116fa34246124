from gateway_admin.db.repositories.selectors import SelectorRepository

__all__ = ['SelectorRepository']
