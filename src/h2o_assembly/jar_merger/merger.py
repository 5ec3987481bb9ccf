"""
Merges several jars into a single jar.
"""

import logging
import os
import pathlib
import zipfile
from dataclasses import dataclass, field
from typing import List, Sequence, Set, Union

from h2o_assembly.assembly_exceptions import AssemblyException
from h2o_assembly.assembly_logger import AssemblyLogger

MANIFEST_PATH = "META-INF/MANIFEST.MF"
MANIFEST = "Manifest-Version: 1.0\r\nCreated-By: h2o-assembly\r\n\r\n"


def extended_jar_base_name(original_jar: str) -> str:
    """
    Base name of the extended jar: driver jars extend into h2odriver_extended.
    """
    if "h2odriver" in pathlib.Path(original_jar).name.lower():
        return "h2odriver_extended"
    return "h2o_extended"


@dataclass
class MergeResult:
    output_path: str
    entries_written: int = 0
    duplicates_skipped: List[str] = field(default_factory=list)


class JarMerger:
    """
    Copies the entries of the input jars, in order, into one output jar.

    The first jar providing a path wins. Input manifests are dropped and a
    fresh manifest is written as the first entry.
    """

    def __init__(self, logger: AssemblyLogger):
        self.logger = logger

    def merge(
        self, inputs: Sequence[str], output: Union[str, pathlib.Path]
    ) -> MergeResult:
        """
        Merge inputs into output.

        Args:
            inputs: Paths of the jars to merge, in priority order
            output: Path of the jar to create

        Returns:
            MergeResult describing what was written

        Raises:
            AssemblyException: If an input jar is missing or cannot be read
        """
        for jar in inputs:
            if not os.path.isfile(jar):
                raise AssemblyException(f"Jar to merge does not exist: {jar}")

        target = pathlib.Path(output).absolute()
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp = target.with_name(target.name + ".part")
        result = MergeResult(output_path=str(target))
        seen: Set[str] = {MANIFEST_PATH}

        self.logger.log(f"Merging {len(inputs)} jars into {target}", logging.INFO)
        try:
            with zipfile.ZipFile(tmp, "w", compression=zipfile.ZIP_DEFLATED) as out:
                out.writestr(MANIFEST_PATH, MANIFEST)
                result.entries_written += 1
                for jar in inputs:
                    with zipfile.ZipFile(jar) as src:
                        for info in src.infolist():
                            if info.filename.upper() == MANIFEST_PATH:
                                continue
                            if info.filename in seen:
                                if not info.is_dir():
                                    result.duplicates_skipped.append(info.filename)
                                continue
                            seen.add(info.filename)
                            out.writestr(info, src.read(info))
                            result.entries_written += 1
        except (zipfile.BadZipFile, NotImplementedError, OSError) as e:
            tmp.unlink(missing_ok=True)
            raise AssemblyException(f"Cannot merge {target.name}: {e}") from e
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise

        os.replace(tmp, target)

        if result.duplicates_skipped:
            self.logger.log(
                f"Skipped {len(result.duplicates_skipped)} duplicate entries",
                logging.DEBUG,
            )
        self.logger.log(
            f"Wrote {result.entries_written} entries to {target}", logging.INFO
        )
        return result
