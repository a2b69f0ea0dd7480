"""Contracts module - protocols for cross-layer communication.

By depending on protocols rather than concrete implementations, layers remain
loosely coupled and testable.

Example:
    ```python
    from levelgen.contracts import ImageSource

    def count_opaque(image: ImageSource) -> int:
        ...
    ```
"""

from .protocols import (
    AssetResolver as AssetResolver,
    ImageSource as ImageSource,
    LayoutCompilerProtocol as LayoutCompilerProtocol,
    PreferenceStore as PreferenceStore,
    SceneBuilder as SceneBuilder,
)
