# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Front-end shapes handed to the readers.

These mirror what a type checker produces: internal identifiers with stamps,
compiler paths, the typed signature tree (`typedtree`) and the reduced
compiled signature (`compiled`). Nothing here is resolved or documented yet.
"""
