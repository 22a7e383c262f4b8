"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by chroma_checker.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the command files at runtime.
"""

# PyInstaller hidden imports: keep this list in sync with command modules
import chroma_checker.commands.all as _all  # noqa: F401
import chroma_checker.commands.alternatives as _alternatives  # noqa: F401
import chroma_checker.commands.analyze as _analyze  # noqa: F401
import chroma_checker.commands.confusability as _confusability  # noqa: F401
import chroma_checker.commands.preview as _preview  # noqa: F401
import chroma_checker.commands.remap as _remap  # noqa: F401
import chroma_checker.commands.score as _score  # noqa: F401
import chroma_checker.commands.simulate as _simulate  # noqa: F401
