import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent

# Put this repo first so the packages import without installation
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from orbis_spatial import SpatialContextFactory  # noqa: E402


@pytest.fixture
def planar_ctx():
    return SpatialContextFactory(geo=False).new_spatial_context()


@pytest.fixture
def wrap_ctx():
    return SpatialContextFactory(norm_wrap_longitude=True).new_spatial_context()
