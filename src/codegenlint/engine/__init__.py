# topmark:header:start
#
#   project      : CodegenLint
#   file         : __init__.py
#   file_relpath : src/codegenlint/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""CodegenLint validation engine.

The engine is a pure function of ``(text, filename)``: it never reads or
writes files itself. Its components, in processing order:

- [`lexer`][codegenlint.engine.lexer]: find start/end marker tokens
- [`matcher`][codegenlint.engine.matcher]: pair start markers with end markers
- [`options`][codegenlint.engine.options]: parse start-marker option payloads
- [`dispatch`][codegenlint.engine.dispatch]: resolve and run presets
- [`normalize`][codegenlint.engine.normalize]: compare existing and expected content
- [`validator`][codegenlint.engine.validator]: orchestrate the above into diagnostics

[`fixes`][codegenlint.engine.fixes] applies reported fixes on behalf of hosts.
"""
