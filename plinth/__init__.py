__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'plinth'
__author__ = 'Plinth Contributors'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "1.0.0"

from .arguments import *
from .faults import *
from .literals import *
from .senders import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(1, 0, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the arguments
__all__ += arguments.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the literal parsers
__all__ += literals.__all__  # type: ignore[attr-defined]
# Load the exposed API of the senders
__all__ += senders.__all__  # type: ignore[attr-defined]
