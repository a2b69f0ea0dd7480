"""Configuration schema models for layout specifications.

The schemas are organized into the following modules:
- base.py: Enums, version constants and shared models
- root.py: Root layout configuration and persisted session models
"""

from levelgen.application.config.schemas.base import (
    CURRENT_SCHEMA_VERSION as CURRENT_SCHEMA_VERSION,
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
    AxisName as AxisName,
    BuildAxesConfig as BuildAxesConfig,
    ColorRuleConfig as ColorRuleConfig,
    ObjectTypeConfig as ObjectTypeConfig,
    RotationSettingsConfig as RotationSettingsConfig,
    parse_color as parse_color,
)
from levelgen.application.config.schemas.root import (
    LayoutConfiguration as LayoutConfiguration,
    PresetSlotConfig as PresetSlotConfig,
    SessionConfiguration as SessionConfiguration,
)
