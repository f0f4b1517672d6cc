from typing import Tuple

REQUIRED_FIELDS = ('bgBase64', 'sliderBase64', 'sliderY')


def parse_slider_y(value) -> int:
    """Accept ints and integral strings/floats; reject negatives."""
    # bool is an int subclass
    if isinstance(value, bool):
        raise ValueError(f"`sliderY` must be an integer, got {value!r}")
    if isinstance(value, int):
        slider_y = value
    elif isinstance(value, float) and value.is_integer():
        slider_y = int(value)
    elif isinstance(value, str) and value.strip().lstrip('-').isdigit():
        slider_y = int(value.strip())
    else:
        raise ValueError(f"`sliderY` must be an integer, got {value!r}")

    if slider_y < 0:
        raise ValueError(f"`sliderY` must be non-negative, got {slider_y}")
    return slider_y


def parse_locate_request(data) -> Tuple[str, str, int]:
    """
    Validate a {"bgBase64", "sliderBase64", "sliderY"} body.

    Returns:
        (bg_payload, slider_payload, slider_y)

    Raises:
        ValueError: body is not an object, a field is missing or has the wrong type.
    """
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")

    # sliderY == 0 is a valid offset, only absent values count as missing
    for field in REQUIRED_FIELDS:
        if data.get(field) is None or data.get(field) == '':
            raise ValueError(f"Missing Parameter `{field}`")

    for field in ('bgBase64', 'sliderBase64'):
        if not isinstance(data[field], str):
            raise ValueError(f"`{field}` must be a base64 string")

    return data['bgBase64'], data['sliderBase64'], parse_slider_y(data['sliderY'])
