# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Loaders: typed signature trees and compiled signatures → documentation model.

- `ident_env`: the persistent scope environment.
- `resolver`: compiler paths and fragments → doc paths.
- `attrs`: comment extraction glue over the doc-comment parser.
- `cmi`: compiled-signature reader.
- `cmti`: typed-tree reader and the `read_interface` entry point.
- `printer`: debug rendering of the model.
"""

from sigdoc.loader.cmti import CmtiReader, read_interface

__all__ = ["CmtiReader", "read_interface"]
