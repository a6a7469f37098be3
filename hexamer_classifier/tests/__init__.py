#!/usr/bin/env python3

"""
Test suite for the hexamer classifier.

Unit tests covering:
- Core data structures and configuration
- Record reading and validation
- Hexamer profiling and log-odds classification
- End-to-end pipeline and command-line behavior
"""
