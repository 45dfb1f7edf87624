"""Person model for a single guest parsed from the roster.

A Person is derived from one `"Last, First[, Suffix]"` token of a roster
names cell. It is rebuilt from the sheet on every request and never
modified after parsing.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Person(BaseModel):
    """A guest belonging to a party.

    Attributes:
        last_name: Family name, used for lookup matching.
        first_name: Given name.
        suffix: Optional generational suffix such as "Jr" or "III".
        display_name: Rendered name, "First Last" with ", Suffix"
            appended when a suffix is present.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    last_name: str = ""
    first_name: str = ""
    suffix: str = ""
    display_name: str = ""

    @property
    def is_blank(self) -> bool:
        """True when neither name field survived parsing."""
        return not (self.last_name or self.first_name)
