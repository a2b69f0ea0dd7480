"""Infrastructure layer - image input, scene output, storage and exporters."""

from .exporters import ExportManager, ExporterRegistry
from .images import ImageLoadError, PixelGrid, RasterImage, load_image
from .persistence import (
    SESSION_KEY,
    FileAssetResolver,
    SessionPersistenceAdapter,
    schema_to_session,
    session_to_schema,
)
from .preferences import (
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    PreferenceStoreError,
)
from .scene import SceneDocument, SceneDocumentBuilder, SceneEntity

__all__ = [
    "ExportManager",
    "ExporterRegistry",
    "FileAssetResolver",
    "ImageLoadError",
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
    "PixelGrid",
    "PreferenceStoreError",
    "RasterImage",
    "SESSION_KEY",
    "SceneDocument",
    "SceneDocumentBuilder",
    "SceneEntity",
    "SessionPersistenceAdapter",
    "load_image",
    "schema_to_session",
    "session_to_schema",
]
