"""bootstrap-tool.

Scaffolds a new Node project directory:
- validates prerequisite executables
- initializes and patches `package.json`
- applies editorconfig/prettier/eslint presets
- writes a README and an initial git commit
"""

__version__ = "0.1.0"

from bootstrap_tool.config import BootstrapSettings, RunOptions

__all__ = ["__version__", "BootstrapSettings", "RunOptions"]
