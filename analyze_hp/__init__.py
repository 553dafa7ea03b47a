# -*- coding: utf-8 -*-
"""Character interaction network analysis for Harry Potter book 1."""
