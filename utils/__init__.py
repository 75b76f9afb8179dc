# utils/__init__.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Utility module exports

from .dimacs_reader import (
    Clause,
    DimacsCNF,
    DimacsFormatError,
    MalformedDimacsHeader,
    parse_dimacs,
    read_dimacs,
    is_valid_dimacs,
    dimacs_report,
    dimacs_to_infix,
    format_dimacs,
    cnf_to_dimacs,
)

__all__ = [
    "Clause",
    "DimacsCNF",
    "DimacsFormatError",
    "MalformedDimacsHeader",
    "parse_dimacs",
    "read_dimacs",
    "is_valid_dimacs",
    "dimacs_report",
    "dimacs_to_infix",
    "format_dimacs",
    "cnf_to_dimacs",
]
