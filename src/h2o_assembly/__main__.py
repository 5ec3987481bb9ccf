"""
Command line entry point.

Examples:

    # extend the jar named by H2O_ORIGINAL_JAR
    export H2O_ORIGINAL_JAR=/path/to/h2o.jar
    h2o-assembly

    # download and extend the base h2o jar
    h2o-assembly --download-and-extend

    # download and extend the h2o driver jar for a hadoop distribution
    h2o-assembly --download-and-extend cdh5.4

The download flag takes priority over H2O_ORIGINAL_JAR when both are given.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from h2o_assembly.assembly_config import AssemblyConfig
from h2o_assembly.assembly_exceptions import AssemblyException
from h2o_assembly.assembly_logger import AssemblyLogger
from h2o_assembly.artifact_models import ResolutionRequest
from h2o_assembly.extend_jar import ExtendJarTask


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="h2o-assembly",
        description="Extend the h2o or h2o driver jar with the h2o-scala classes.",
    )
    p.add_argument("--project-dir", default=".", help="Directory holding assembly.toml")
    p.add_argument("--config", help="Configuration file to use instead of assembly.toml")
    p.add_argument(
        "--build-dir", help="Override the build directory, relative to --project-dir"
    )
    p.add_argument(
        "--download-and-extend",
        nargs="?",
        const="",
        default=None,
        metavar="HADOOP_VERSION",
        help="Download the h2o jar, or the h2o driver jar for HADOOP_VERSION",
    )
    p.add_argument(
        "--resolve-only",
        action="store_true",
        help="Print the path of the jar to extend without merging",
    )
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    logger = AssemblyLogger()

    try:
        config = AssemblyConfig.load(args.project_dir, args.config)
        if args.build_dir:
            config.build_dir = os.path.join(args.project_dir, args.build_dir)

        request = ResolutionRequest.from_environment(
            os.environ,
            variant_selector=args.download_and_extend,
            cache_directory=config.cache_dir,
            env_var=config.original_jar_env_var,
        )
        task = ExtendJarTask(config, logger)

        if args.resolve_only:
            path = task.resolve(request)
            if path is not None:
                print(path)
            return 0

        output = task.run(request)
        if output is not None:
            print(output)
        return 0
    except AssemblyException as e:
        logger.log(str(e), logging.ERROR)
        return 1


if __name__ == "__main__":
    sys.exit(main())
