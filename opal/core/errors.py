"""
Error taxonomy for contract augmentation
"""

from typing import Sequence


class AugmentationError(Exception):
    """Base class: every augmentation failure aborts the whole operation"""


class AnchorNotFound(AugmentationError):
    """A required insertion point could not be located in the base document"""

    def __init__(self, message: str, path: str = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class DuplicateCapability(AugmentationError):
    """The profile adds a capability the declaration already inherits"""

    def __init__(self, names: Sequence[str], declaration: str):
        self.names = tuple(names)
        self.declaration = declaration
        super().__init__(
            f"Contract '{declaration}' already inherits: {', '.join(self.names)}"
        )


class AlreadyAugmented(AugmentationError):
    """The base document is itself the output of this profile"""


class OutputPathConflict(AugmentationError):
    """The derived file would overwrite the base document"""


class IOFailure(AugmentationError):
    """Reading the base file or writing the derived file failed"""

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"I/O error on {path}: {cause}")


class UnknownProfile(KeyError):
    """No augmentation profile registered under the requested family id"""

    def __str__(self):
        return str(self.args[0]) if self.args else "unknown profile"


class BootstrapError(Exception):
    """Cloning a template repository failed"""


class DeploymentError(Exception):
    """Compilation or deployment script failed, or inputs are missing"""
