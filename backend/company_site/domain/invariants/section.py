from collections.abc import Mapping
from .exceptions import InvariantViolation

# company_sections.order is a signed 32-bit INTEGER column
ORDER_MIN = -2**31
ORDER_MAX = 2**31 - 1


def assert_section_order(order):
    # bool is an int subclass; True/False are never valid positions
    if order is None:
        return
    if isinstance(order, bool) or not isinstance(order, int):
        raise InvariantViolation(
            f"Section order must be an integer, got {order!r}"
        )
    if not ORDER_MIN <= order <= ORDER_MAX:
        raise InvariantViolation(
            f"Section order must be between {ORDER_MIN} and {ORDER_MAX}, got {order}"
        )


def assert_section(data):
    if not isinstance(data, Mapping):
        raise InvariantViolation("Section must be an object.")

    template = data.get("template")
    if template is not None and not isinstance(template, Mapping):
        raise InvariantViolation("Section template must be an object.")

    for key in ("category", "template_name", "label"):
        value = (template or {}).get(key)
        if value is not None and not isinstance(value, str):
            raise InvariantViolation(f"Section template {key} must be a string.")

    payload = data.get("data")
    if payload is not None and not isinstance(payload, Mapping):
        raise InvariantViolation("Section data must be an object.")

    assert_section_order(data.get("order"))
