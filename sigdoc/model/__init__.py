# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Documentation model.

Pipeline placement:
  typed tree / compiled signature → loader → doc model (this package)

Everything here is plain data: declarations carry their Identifier and their
extracted documentation, references are DocPaths. Nodes are frozen; the
loader builds each node once and never revisits it.
"""
