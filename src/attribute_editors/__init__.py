"""
Attribute Editors
=================

Resolution of the editor responsible for a configurable component attribute:
dedicated editors bound to one component attribute take precedence over type
editors bound to a value type, which are filtered by nominal type
compatibility and constraint satisfaction and then ranked.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .attributes import *
from .attributes import __all__ as _attributes_all
from .compatibility import *
from .compatibility import __all__ as _compatibility_all
from .constraints import *
from .constraints import __all__ as _constraints_all
from .editors import *
from .editors import __all__ as _editors_all
from .errors import *
from .errors import __all__ as _errors_all
from .hierarchy import *
from .hierarchy import __all__ as _hierarchy_all
from .registry import *
from .registry import __all__ as _registry_all
from .loader import *
from .loader import __all__ as _loader_all
from .resolver import *
from .resolver import __all__ as _resolver_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("attribute-editors")
__all__ = [
    "__version__",
    *_attributes_all,
    *_compatibility_all,
    *_constraints_all,
    *_editors_all,
    *_errors_all,
    *_hierarchy_all,
    *_registry_all,
    *_loader_all,
    *_resolver_all,
    *_types_all,
]

del _attributes_all
del _compatibility_all
del _constraints_all
del _editors_all
del _errors_all
del _hierarchy_all
del _registry_all
del _loader_all
del _resolver_all
del _types_all
