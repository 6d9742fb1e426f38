# -*- coding: utf-8 -*-
"""Translation dictionaries keyed by language code."""
