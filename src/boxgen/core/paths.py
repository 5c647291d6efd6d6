"""Directory layout of the android test project.

ProjectPaths resolves every location the generator touches: the android
module holding the generated sources, the tested module receiving compiled
classes, and the repository-relative inputs from configuration.
"""

from pathlib import Path

from boxgen.core.config import BoxgenConfig

ANDROID_MODULE_DIRNAME = "android-module"
TESTED_MODULE_DIRNAME = "tested-module"


class ProjectPaths:
    """Path layout for one generation run.

    Attributes:
        root: Repository root; relative inputs resolve against it.
        tmp_folder: Scratch folder holding both android modules.

    """

    def __init__(self, root: Path, tmp_folder: Path) -> None:
        self.root = root.resolve()
        self.tmp_folder = tmp_folder if tmp_folder.is_absolute() else self.root / tmp_folder

    @classmethod
    def from_config(cls, config: BoxgenConfig) -> "ProjectPaths":
        return cls(config.paths.root, config.paths.tmp_folder)

    def resolve(self, path: Path) -> Path:
        """Resolve a configured path against the repository root."""
        return path if path.is_absolute() else self.root / path

    @property
    def android_tmp_folder(self) -> Path:
        return self.tmp_folder / ANDROID_MODULE_DIRNAME

    @property
    def libs_folder_in_android_tmp_folder(self) -> Path:
        return self.android_tmp_folder / "libs"

    @property
    def src_folder_in_android_tmp_folder(self) -> Path:
        return self.android_tmp_folder / "src"

    @property
    def android_tested_module_tmp_folder(self) -> Path:
        return self.tmp_folder / TESTED_MODULE_DIRNAME

    @property
    def libs_folder_in_android_tested_module_tmp_folder(self) -> Path:
        return self.android_tested_module_tmp_folder / "libs"

    @property
    def output_for_compiled_files(self) -> Path:
        """Directory receiving the class files of every compiled test case."""
        return self.android_tested_module_tmp_folder / "bin" / "classes"

    def generated_test_file(self, package: str, class_name: str) -> Path:
        """Location of the generated test class source."""
        return self.src_folder_in_android_tmp_folder.joinpath(*package.split(".")) / (
            f"{class_name}.java"
        )

    def __repr__(self) -> str:
        return f"ProjectPaths(root={self.root!s}, tmp_folder={self.tmp_folder!s})"
