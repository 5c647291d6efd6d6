"""Test data discovery: walking, classification, naming and package rewriting.

Usage:
    from boxgen.discovery import ClassificationSets, FileClassifier, TestDataWalker

    classifier = FileClassifier(ClassificationSets(excluded=frozenset({"broken.kt"})))
    for unit in TestDataWalker(classifier).walk(Path("compiler/testData/codegen")):
        print(unit.path, classifier.classify(unit.name))
"""

from boxgen.discovery.classifier import ClassificationSets, ConfigurationVariant, FileClassifier
from boxgen.discovery.naming import NameAllocator
from boxgen.discovery.package_rewriter import namespace_token, rewrite_package
from boxgen.discovery.types import SourceUnit
from boxgen.discovery.walker import TestDataWalker

__all__ = [
    "ClassificationSets",
    "ConfigurationVariant",
    "FileClassifier",
    "NameAllocator",
    "SourceUnit",
    "TestDataWalker",
    "namespace_token",
    "rewrite_package",
]
