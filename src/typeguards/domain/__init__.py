"""Domain layer: the guard unit, value dispatch, combinators and schemas.

This layer depends only on the stdlib.
It must never import from config or the public catalog.
"""
