# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Doc-comment parser service.

Given the raw payload of a documentation attribute, produce a structured
`DocBody` or raise `DocParseError`. Consumers never see the error: comment
extraction (`sigdoc.loader.attrs`) turns it into a `DocError` value.
"""

from sigdoc.docparse.parser import DocParseError, parse_doc

__all__ = ["DocParseError", "parse_doc"]
