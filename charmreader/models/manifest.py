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
"""Model for a charm's manifest.yaml file."""
import dataclasses
from typing import Any

import pydantic
from typing_extensions import Self

from charmreader import const
from charmreader.errors import MetadataError, NotValidError
from charmreader.models.base import DocumentModel
from charmreader.models.platform import Base, Channel


class _BaseDocument(DocumentModel):
    """One entry of the manifest's bases, as written in the YAML document."""

    model_config = pydantic.ConfigDict(extra="ignore")

    name: const.PlatformName | None = None
    channel: pydantic.StrictStr | None = None


class _ManifestDocument(DocumentModel):
    """The manifest.yaml document.

    Packing tools record more than the bases here; only the bases matter.
    """

    file_name = const.MANIFEST_FILENAME
    model_config = pydantic.ConfigDict(extra="ignore")

    bases: list[_BaseDocument] | None = None


@dataclasses.dataclass(frozen=True)
class Manifest:
    """The bases a charm declares to run on.

    ``bases`` is None when no bases were provided at all, and an empty tuple
    when the manifest explicitly lists none.
    """

    bases: tuple[Base, ...] | None = None

    @classmethod
    def from_raw(cls, raw: Any) -> Self:
        """Build a manifest from the decoded manifest.yaml content.

        Every base is validated as it is built; the first invalid one aborts
        the whole parse.

        :raises MetadataError: if the content does not follow the manifest schema.
        :raises NotValidError: if a base is not valid.
        """
        if raw is None:
            return cls(bases=None)

        document = _ManifestDocument.unmarshal(raw)
        bases = []
        for base_doc in document.bases or ():
            channel = None
            if base_doc.channel is not None:
                try:
                    channel = Channel.parse(base_doc.channel)
                except NotValidError as err:
                    raise MetadataError(
                        f"parsing channel {base_doc.channel!r}: {err}",
                        file_name=const.MANIFEST_FILENAME,
                    ) from err
            name = None if base_doc.name is None else base_doc.name.value
            base = Base(name=name, channel=channel)
            base.validate()
            bases.append(base)
        return cls(bases=tuple(bases))

    def validate(self) -> None:
        """Verify all the bases.

        :raises NotValidError: on the first base that is not valid.
        """
        for base in self.bases or ():
            try:
                base.validate()
            except NotValidError as err:
                raise NotValidError("invalid base", details=f"{base}: {err}") from err
