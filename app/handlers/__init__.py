# -*- coding: utf-8 -*-
"""Handlers por evento para runtimes serverless."""
