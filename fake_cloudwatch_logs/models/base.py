"""
Base Model Components and Mixins

The emulated service speaks camelCase (``logGroupName``, ``nextToken``) while
Python code uses snake_case attributes. ``ServiceModel`` bridges the two with a
camelCase alias generator, so every model:

- accepts wire/fixture dicts as well as keyword arguments
  (``LogGroup(logGroupName="a")`` and ``LogGroup(log_group_name="a")``)
- serializes back to the wire shape with ``to_service_dict()``

## Components

- ServiceModel: camelCase aliasing plus service (de)serialization helpers
"""

import logging
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


class ServiceModel(BaseModel):
    """
    Mixin providing service-shaped serialization and deserialization.

    Features:
    - camelCase aliases generated from field names
    - Population by either field name or alias
    - ``None`` fields dropped on output, matching service responses
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_service_dict(self) -> Dict[str, Any]:
        """
        Convert model to the service's camelCase dictionary shape.

        Returns:
            Dictionary ready to be JSON encoded or handed to a botocore client

        Example:
            payload = group.to_service_dict()
            # {'logGroupName': 'app', 'creationTime': 1700000000000, ...}
        """
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_service_dict(cls, item: Dict[str, Any]):
        """
        Create model instance from a camelCase service dictionary.

        Args:
            item: Dictionary as returned by the service or stored in a fixture

        Returns:
            Model instance

        Raises:
            ValidationError: If item data is invalid for the model
        """
        try:
            return cls.model_validate(item)
        except PydanticValidationError as e:
            logger.error(f"Failed to convert service item to {cls.__name__}: {e}")
            raise ValidationError(
                f"Failed to convert service item to {cls.__name__}: {e}",
                errors={'.'.join(str(loc) for loc in err['loc']): err['msg'] for err in e.errors()},
                original_error=e
            ) from e
