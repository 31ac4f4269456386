"""Products bounded context: catalogue items and their stock quantity.

Composition root for the domain. Everything registered with ``products``
(aggregate, commands, events, repository, projections) is discovered when
``products.init()`` runs.
"""

from protean.domain import Domain

from products.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

products = Domain(name="products")
