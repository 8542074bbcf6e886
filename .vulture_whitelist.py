"""Vulture whitelist — methods called by protocols and frameworks, not direct code."""

# FieldMappable protocol — called through as_record_map()
from uritemplates.values import FieldMappable, UriRecord

FieldMappable.to_field_map
UriRecord.to_field_map

# Pydantic configuration — read by pydantic-settings
from uritemplates.settings import Settings

Settings.model_config

# Public API entry points
from uritemplates.template import UriTemplate

UriTemplate.parse
UriTemplate.names
