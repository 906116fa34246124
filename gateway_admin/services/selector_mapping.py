"""Conversions between selector write models, stored entities and read models."""
from __future__ import annotations

from typing import Any, Dict

from gateway_admin.domain.entities import SelectorEntity, match_mode_name, selector_type_name
from gateway_admin.domain.errors import ValidationError
from gateway_admin.schemas.selector import SelectorConditionVO, SelectorDTO, SelectorVO


def require_new_selector_fields(selector: SelectorDTO) -> None:
    """A new selector needs an owning plugin and a name."""
    if not selector.plugin_id or not selector.plugin_id.strip():
        raise ValidationError("pluginId is required")
    if not selector.name or not selector.name.strip():
        raise ValidationError("name is required")


def mutable_fields(selector: SelectorDTO) -> Dict[str, Any]:
    """Fields a create or update writes, in entity naming."""
    return {
        "plugin_id": selector.plugin_id,
        "name": selector.name.strip() if selector.name else selector.name,
        "match_mode": selector.match_mode,
        "type": selector.type,
        "sort": selector.sort,
        "enabled": selector.enabled,
        "loged": selector.loged,
        "continued": selector.continued,
        "handle": selector.handle,
        "conditions": [
            {
                "param_type": condition.param_type,
                "operator": condition.operator,
                "param_name": condition.param_name,
                "param_value": condition.param_value,
            }
            for condition in selector.selector_conditions
        ],
    }


def entity_to_vo(entity: SelectorEntity) -> SelectorVO:
    return SelectorVO(
        id=entity["id"],
        plugin_id=entity["plugin_id"],
        name=entity["name"],
        match_mode=entity["match_mode"],
        match_mode_name=match_mode_name(entity["match_mode"]),
        type=entity["type"],
        type_name=selector_type_name(entity["type"]),
        sort=entity["sort"],
        enabled=entity["enabled"],
        loged=entity["loged"],
        continued=entity["continued"],
        handle=entity["handle"],
        selector_conditions=[SelectorConditionVO(**condition) for condition in entity["conditions"]],
        date_created=entity["date_created"],
        date_updated=entity["date_updated"],
    )
