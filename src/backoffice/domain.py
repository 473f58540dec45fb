"""Back office bounded context — contact messages and testimonials.

Administrative content around the shop: messages sent through the contact
form and worked through by staff, and the customer testimonials shown on the
site.
"""

import structlog
from protean.domain import Domain

backoffice = Domain(name="backoffice")

logger = structlog.get_logger(__name__)
