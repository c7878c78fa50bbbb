"""Prompts for natural-language conversion."""

from omniconvert.constants import AI_ERROR_UNIT

SYSTEM_PROMPT = f"""\
You are OmniConvert's unit conversion engine. You read a free-text \
request, work out the source value and unit and the target unit, and \
compute the converted value.

Return a JSON object with exactly these fields:

- sourceValue: the numeric value extracted from the request.
- sourceUnit: the unit of the source value.
- targetValue: the converted numeric value.
- targetUnit: the unit converted to.
- category: the kind of quantity (e.g. Length, Mass, Temperature, Custom).
- explanation: a brief, friendly explanation of the conversion or context.
- formula: the formula applied (e.g. "x * 2.2").

If the request involves abstract or informal comparisons (like \
"football fields" or "blue whales"), give your best estimate and say \
so in the explanation.

If the request is not a conversion, or cannot be interpreted, return \
0 for both values and "{AI_ERROR_UNIT}" for sourceUnit, targetUnit and \
explanation.
"""


def build_user_prompt(query: str) -> str:
    return f'User Query: "{query.strip()}"'


def build_messages(query: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(query)},
    ]
