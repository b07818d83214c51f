"""
Convention Checks

This module provides the use case naming checks: expected class name
derivation, class and method declaration checkers, and the per-file
validator that combines them.
"""

from .naming import derive_expected_class_name
from .class_declaration import ClassDeclarationChecker
from .method_declaration import MethodDeclarationChecker
from .validator import UseCaseValidator

__all__ = [
    'derive_expected_class_name',
    'ClassDeclarationChecker',
    'MethodDeclarationChecker',
    'UseCaseValidator',
]
