"""
Review comment texts produced by the checkers.
"""

from typing import Optional

NO_CLASS_MESSAGE = "This file does not contain a use case class."
INVALID_CLASS_MESSAGE = "This use case file does not contain a valid use case class.\n"


def must_contain_method_message(method_name: str) -> str:
    return f"This class must contain only one public method called `{method_name}`"


def multiple_classes_message(file_path: str) -> str:
    return f"The `{file_path}` must not contain more than one class."


def invalid_class_name_message(
    expected_class_name: str,
    real_class_name: Optional[str] = None,
    class_declaration: Optional[str] = None,
    add_suggestion: bool = True,
) -> str:
    """
    Build the body for a misnamed (or missing) use case class.

    With a suggestion the body ends in a GitHub ``suggestion`` block holding
    the declaration with the first occurrence of the real name replaced.
    """
    message = INVALID_CLASS_MESSAGE

    if add_suggestion and real_class_name and class_declaration is not None:
        suggested = class_declaration.replace(real_class_name, expected_class_name, 1)
        message += "\n```suggestion\n"
        message += suggested
        message += "\n```"
    elif real_class_name:
        message += f"It is `{real_class_name}`, but should be `{expected_class_name}`."
    else:
        message += f"It should be `{expected_class_name}`."

    return message
