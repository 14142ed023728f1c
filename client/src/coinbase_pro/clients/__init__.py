"""
Endpoint clients.

``PublicClient`` serves unauthenticated market data and ``PrivateClient``
the signed account API.  They are deliberately separate classes so that
code holding market data access never holds credentials.
"""

from .private import PrivateClient  # noqa: F401
from .public import Granularity, PublicClient  # noqa: F401
