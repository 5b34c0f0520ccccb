# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Identifiers, doc paths, name policies and reader configuration."""
