# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
sigdoc package: typed signature trees → documentation model.

Layers:
  frontend: typed tree and compiled signature shapes handed over by the front-end
  core:     identifiers, doc paths, name policies, spans, reader configuration
  model:    the documentation model (type expressions, docs, declarations)
  docparse: doc-comment parser service (lark grammar)
  loader:   scope environment, resolver, comment extraction and both readers

Entry point: `sigdoc.loader.cmti.read_interface`.
"""

__all__ = ["core", "model", "frontend", "docparse", "loader"]
