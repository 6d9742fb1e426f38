# -*- coding: utf-8 -*-
"""Signup wizard services: sequencing, validation and navigable location."""

from .step_sequencer import StepKind, StepSequencer
from .step_validator import StepValidator
from .step_router import StepRouter

__all__ = ['StepKind', 'StepSequencer', 'StepValidator', 'StepRouter']
