# -*- coding: utf-8 -*-
"""Exceptions raised while building the partner map."""


class PartnerMapError(Exception):
    """Base class for errors that stop a map build."""


class DataLoadError(PartnerMapError):
    """An input file is missing, unreadable, or unusable as given."""
