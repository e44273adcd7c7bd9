"""Example grammars built from the combinator library.

- c: ``//`` and ``/* */`` comments
- jsdoc: ``/** @tag {Type} */`` tag maps
"""

from hebras.grammars.c import Comment, comment
from hebras.grammars.jsdoc import JsdocComment, jsdoc

__all__ = ["Comment", "JsdocComment", "comment", "jsdoc"]
