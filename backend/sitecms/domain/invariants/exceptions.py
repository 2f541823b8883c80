from sitecms.errors import ValidationFailure


class InvariantViolation(ValidationFailure):
    default_message = "Invariant violated"
