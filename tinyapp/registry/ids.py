"""Unique identifier allocation shared by the registries."""

import logging
from typing import Container, Optional

from ..results import IdentifierExhaustedError
from ..shortcode import ShortCodeGenerator


def allocate_id(
    generator: ShortCodeGenerator,
    taken: Container[str],
    max_collision_retries: int,
    logger: Optional[logging.Logger] = None,
) -> str:
    """Generate an identifier not present in ``taken``.
    
    Args:
        generator: Random identifier source
        taken: Identifiers already in use
        max_collision_retries: Extra attempts allowed after the first collision
        logger: Optional logger
        
    Returns:
        Unused identifier
        
    Raises:
        IdentifierExhaustedError: If every attempt collided
    """
    logger = logger or logging.getLogger(__name__)
    
    for attempt in range(max_collision_retries + 1):
        code = generator.generate_random()
        if code not in taken:
            if attempt:
                logger.debug(f"Generated id after {attempt + 1} attempts: {code}")
            return code
        logger.debug(f"Id collision on {code}, retrying")
    
    raise IdentifierExhaustedError(
        f"Unable to generate unique id after {max_collision_retries + 1} attempts"
    )
