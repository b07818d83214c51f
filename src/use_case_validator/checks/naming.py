"""
Name Derivation

Derives the class name a use case file is expected to declare
from the file's base name.
"""

DEFAULT_FILE_SUFFIX = "_use_case.dart"
DEFAULT_CLASS_SUFFIX = "UseCase"


def derive_expected_class_name(
    file_name: str,
    file_suffix: str = DEFAULT_FILE_SUFFIX,
    class_suffix: str = DEFAULT_CLASS_SUFFIX,
) -> str:
    """
    Build the expected class name for a use case file.

    ``math_utils_use_case.dart`` becomes ``MathUtilsUseCase``: the file
    suffix is stripped, every underscore-separated segment gets its first
    character upper-cased, and the class suffix is appended.

    Args:
        file_name: Base name of the file (no directories)
        file_suffix: Convention suffix removed from the name when present
        class_suffix: Token appended to the derived name

    Returns:
        Expected class name
    """
    stem = file_name
    if file_suffix and stem.endswith(file_suffix):
        stem = stem[:-len(file_suffix)]

    segments = [segment for segment in stem.split("_") if segment]
    return "".join(segment[0].upper() + segment[1:] for segment in segments) + class_suffix


def is_use_case_path(path: str, file_suffix: str = DEFAULT_FILE_SUFFIX) -> bool:
    """Check whether a repository path follows the use case file convention."""
    return path.endswith(file_suffix)
