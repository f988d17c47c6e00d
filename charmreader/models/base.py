# Copyright 2024 Canonical Ltd.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# For further info, check https://github.com/canonical/charmreader

"""Charmreader basic pydantic model."""
from typing import Any, ClassVar

import pydantic
from typing_extensions import Self

from charmreader.errors import MetadataError
from charmreader.format import format_pydantic_errors


def alias_generator(name: str) -> str:
    """Turn a python attribute name into its YAML key."""
    return name.replace("_", "-")


class DocumentModel(pydantic.BaseModel):
    """Base for the models of the YAML documents inside a charm.

    Subclasses set ``file_name`` to the charm entry they represent, so errors
    point at the offending file.
    """

    model_config = pydantic.ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=alias_generator,
    )

    file_name: ClassVar[str]

    def marshal(self) -> dict[str, Any]:
        """Convert to a dictionary shaped like the YAML document."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def unmarshal(cls, data: Any) -> Self:
        """Create and populate a new model object from its decoded YAML content.

        :raises MetadataError: if the content is not a mapping or fails the schema.
        """
        if not isinstance(data, dict):
            raise MetadataError(
                f"The {cls.file_name} file does not contain a YAML mapping.",
                file_name=cls.file_name,
            )
        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as error:
            raise MetadataError(
                format_pydantic_errors(error.errors(), file_name=cls.file_name),
                file_name=cls.file_name,
            ) from error
