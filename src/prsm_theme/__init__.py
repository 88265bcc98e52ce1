"""
PRSMTECH theme compiler.

Compiles one design token document into framework themes:

- base.css      - shared ``--prsm-*`` custom properties
- slidev.css    - Slidev theme
- reveal.css    - Reveal.js theme
- webslides.css - WebSlides theme
- config.js     - Tailwind CSS ``theme.extend`` config

Usage:
    from prsm_theme import compile_tokens, load_tokens

    result = compile_tokens(load_tokens(Path("variables.json")))
    for artifact in result.artifacts:
        print(artifact.filename, artifact.success)
"""

from prsm_theme._version import __version__
from prsm_theme.api import (
    Framework,
    get_css_variables,
    get_design_tokens,
    get_inline_styles,
    get_theme_css,
    get_theme_path,
)
from prsm_theme.compiler import (
    BuildReport,
    CompileResult,
    GeneratedArtifact,
    build,
    compile_tokens,
    write_artifacts,
)
from prsm_theme.core import (
    CompilerConfig,
    MalformedTokenError,
    MissingInputError,
    ThemeError,
    TokenStore,
    WriteError,
    categorize,
    flatten_tokens,
    load_tokens,
)
from prsm_theme.generators import GENERATORS

__all__ = [
    "__version__",
    "BuildReport",
    "CompileResult",
    "CompilerConfig",
    "Framework",
    "GENERATORS",
    "GeneratedArtifact",
    "MalformedTokenError",
    "MissingInputError",
    "ThemeError",
    "TokenStore",
    "WriteError",
    "build",
    "categorize",
    "compile_tokens",
    "flatten_tokens",
    "get_css_variables",
    "get_design_tokens",
    "get_inline_styles",
    "get_theme_css",
    "get_theme_path",
    "load_tokens",
    "write_artifacts",
]
