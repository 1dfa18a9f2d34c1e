"""Evaluation-time exceptions."""

from typeselect.domain.exceptions.base import TypeSelectError


class AttributePredicateError(TypeSelectError):
    """Attribute value predicate raised while evaluating a candidate.

    Only raised under PredicateErrorPolicy.PROPAGATE.
    Original exception available as __cause__.

    Attributes:
        qualified_name: Candidate being evaluated
        attribute_type: Attribute type the predicate was bound to
    """

    def __init__(self, qualified_name: str, attribute_type: type) -> None:
        self.qualified_name = qualified_name
        self.attribute_type = attribute_type
        super().__init__(
            f"attribute predicate for {attribute_type.__name__} failed on '{qualified_name}'"
        )
