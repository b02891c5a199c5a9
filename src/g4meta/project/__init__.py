"""
Project model and build descriptor reading.
"""

from g4meta.project.diagnostics import Diagnostic, Severity
from g4meta.project.model import Project, ProjectBuilder
from g4meta.project.descriptor import (
    DescriptorReader,
    DescriptorResult,
    find_descriptors,
    parse_descriptor,
)

__all__ = [
    "Diagnostic",
    "Severity",
    "Project",
    "ProjectBuilder",
    "DescriptorReader",
    "DescriptorResult",
    "find_descriptors",
    "parse_descriptor",
]
