# -*- coding: utf-8 -*-
"""
Static HTML map of Illinois food-access partners
(farmers markets, stores, CSAs, mobile and pop-up markets).
"""

__version__ = "0.1.0"
