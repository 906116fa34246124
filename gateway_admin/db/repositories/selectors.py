from sqlalchemy.orm import Session, selectinload
from gateway_admin.db.models import Selector, SelectorCondition
from typing import Any, Dict, List, Optional, Sequence

class SelectorRepository:
    """Repository for selector operations."""
    
    def __init__(self, db: Session):
        self.db = db
    
    def _filtered(self, plugin_id: Optional[str]):
        query = self.db.query(Selector)
        if plugin_id:
            query = query.filter(Selector.plugin_id == plugin_id)
        return query
    
    def count(self, plugin_id: Optional[str] = None) -> int:
        """
        Count selectors, optionally only those of one plugin.
        
        Args:
            plugin_id: Owning plugin ID (optional)
            
        Returns:
            Number of matching selectors
        """
        return self._filtered(plugin_id).count()
    
    def list_page(self, plugin_id: Optional[str], offset: int, limit: int) -> List[Selector]:
        """
        Get one page of selectors ordered by sort, then name.
        
        Args:
            plugin_id: Owning plugin ID (optional)
            offset: Number of selectors to skip
            limit: Maximum number of selectors to return
            
        Returns:
            Selectors on the requested page
        """
        return (
            self._filtered(plugin_id)
            .options(selectinload(Selector.conditions))
            .order_by(Selector.sort, Selector.name, Selector.id)
            .offset(offset)
            .limit(limit)
            .all()
        )
    
    def get_selector(self, selector_id: str) -> Optional[Selector]:
        """
        Get a selector by ID.
        
        Returns:
            Selector if found, None otherwise
        """
        return self.db.query(Selector).filter(Selector.id == selector_id).first()
    
    def create_selector(self, fields: Dict[str, Any]) -> Selector:
        """
        Create a new selector with its conditions.
        
        Args:
            fields: Column values plus a ``conditions`` list of dicts
            
        Returns:
            Created selector
        """
        values = dict(fields)
        conditions = values.pop("conditions", [])
        selector = Selector(**values)
        selector.conditions = self._build_conditions(conditions)
        self.db.add(selector)
        self.db.commit()
        self.db.refresh(selector)
        return selector
    
    def update_selector(self, selector: Selector, fields: Dict[str, Any]) -> Selector:
        """
        Overwrite a selector; its conditions are replaced as a whole.
        
        Args:
            selector: Persistent selector to change
            fields: Column values plus a ``conditions`` list of dicts
            
        Returns:
            Updated selector
        """
        values = dict(fields)
        conditions = values.pop("conditions", [])
        for key, value in values.items():
            setattr(selector, key, value)
        selector.conditions = self._build_conditions(conditions)
        self.db.commit()
        self.db.refresh(selector)
        return selector
    
    def delete_selectors(self, selector_ids: Sequence[str]) -> List[str]:
        """
        Delete selectors by ID.
        
        Returns:
            IDs of the selectors that existed and were deleted
        """
        if not selector_ids:
            return []
        selectors = self.db.query(Selector).filter(Selector.id.in_(set(selector_ids))).all()
        for selector in selectors:
            self.db.delete(selector)
        self.db.commit()
        return [selector.id for selector in selectors]
    
    @staticmethod
    def _build_conditions(conditions: List[Dict[str, Any]]) -> List[SelectorCondition]:
        return [
            SelectorCondition(position=position, **condition)
            for position, condition in enumerate(conditions)
        ]
