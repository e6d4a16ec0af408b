"""Outcome of a single-file injection."""

from enum import Enum


class InjectionOutcome(str, Enum):
    INJECTED = "injected"
    ALREADY_PRESENT = "already_present"
    NO_HEAD_ELEMENT = "no_head_element"
    NOT_A_FILE = "not_a_file"
    METADATA_SIDECAR = "metadata_sidecar"
    IO_ERROR = "io_error"
