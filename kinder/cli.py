"""Command line front end for kinder."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Collection, Iterable, Sequence

KINDER_VERSION = "0.1.0"
DEFAULT_CLUSTER_NAME = "kind"
DEFAULT_LOG_LEVEL = "warning"

CONTROL_PLANE_NODES_FLAG = "control-plane-nodes"
WORKER_NODES_FLAG = "worker-nodes"

ONLY_KUBEADM_FLAG = "only-kubeadm"
ONLY_KUBELET_FLAG = "only-kubelet"
ONLY_BINARIES_FLAG = "only-binaries"
ONLY_IMAGES_FLAG = "only-images"
EXCLUSIVE_ARTIFACT_FLAGS = (
    ONLY_KUBEADM_FLAG,
    ONLY_KUBELET_FLAG,
    ONLY_BINARIES_FLAG,
    ONLY_IMAGES_FLAG,
)

TRACE = 5

_LOG_LEVELS = {
    "panic": logging.CRITICAL,
    "fatal": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}

_LONG_DESCRIPTION = (
    "kinder is an example of kind used as a library.\n\n"
    "All the kind commands will be available in kinder, side by side with "
    "additional commands\ndesigned for helping kubeadm contributors.\n\n"
    "kinder is still a work in progress. Test It, Break It, Send feedback!"
)

log = logging.getLogger("kinder")


class CommandError(Exception):
    """Raised when a command cannot complete."""


def parse_log_level(name: str) -> int:
    """Return the logging level for a level name; raise ValueError if unknown."""
    try:
        return _LOG_LEVELS[name.lower()]
    except KeyError:
        raise ValueError(f"not a valid log level: {name!r}") from None


def validate_node_counts(control_planes: int, workers: int) -> None:
    """Raise CommandError if either node count is negative."""
    if control_planes < 0 or workers < 0:
        raise CommandError(
            f"flags --{CONTROL_PLANE_NODES_FLAG} and --{WORKER_NODES_FLAG} "
            "should not be a negative number"
        )


def check_exclusive_flags(changed: Collection[str], exclusive: Iterable[str]) -> bool:
    """Return True if at most one of the ``exclusive`` flags was set."""
    return sum(1 for flag in exclusive if flag in changed) <= 1


def _parse_bool(text: str) -> bool:
    value = text.strip()
    if value in ("1", "t", "T", "true", "TRUE", "True"):
        return True
    if value in ("0", "f", "F", "false", "FALSE", "False"):
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {text!r}")


def _add_bool_flag(parser: argparse.ArgumentParser, name: str, help_text: str) -> None:
    parser.add_argument(
        f"--{name}",
        dest=name.replace("-", "_"),
        nargs="?",
        const=True,
        default=None,
        type=_parse_bool,
        metavar="BOOL",
        help=help_text,
    )


class _SliceAppend(argparse.Action):
    """Collect comma separated values across repeated flags."""

    def __call__(self, parser, namespace, values, option_string=None):
        current = list(getattr(namespace, self.dest) or [])
        current.extend(part for part in values.split(",") if part != "")
        setattr(namespace, self.dest, current)


def _run_version(args: argparse.Namespace) -> str:
    return f"kinder version: {KINDER_VERSION}"


def _run_create_cluster(args: argparse.Namespace) -> str | None:
    validate_node_counts(args.control_planes, args.workers)
    raise CommandError(
        f"failed to create cluster {args.name!r}: no cluster manager is available"
    )


def _run_get_artifacts(args: argparse.Namespace) -> str | None:
    changed = {
        flag for flag in EXCLUSIVE_ARTIFACT_FLAGS
        if getattr(args, flag.replace("-", "_")) is not None
    }
    if not check_exclusive_flags(changed, EXCLUSIVE_ARTIFACT_FLAGS):
        raise CommandError(
            f"flags [{', '.join(EXCLUSIVE_ARTIFACT_FLAGS)}] are mutually exclusive, "
            "please set only one of them"
        )
    raise CommandError(
        f"failed to gets build artifacts for {args.src} version: "
        "no artifact extractor is available"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the kinder command tree."""
    parser = argparse.ArgumentParser(
        prog="kinder",
        description=_LONG_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--loglevel",
        default=DEFAULT_LOG_LEVEL,
        help="log level [panic, fatal, error, warning, info, debug, trace]",
    )
    parser.add_argument(
        "--version", action="version", version=f"kinder version {KINDER_VERSION}"
    )
    parser.set_defaults(handler=None, help_parser=parser)
    commands = parser.add_subparsers(dest="command")

    version = commands.add_parser("version", help="prints the kinder CLI version")
    version.set_defaults(handler=_run_version)

    create = commands.add_parser("create", help="Creates a cluster")
    create.set_defaults(help_parser=create)
    create_commands = create.add_subparsers(dest="create_command")
    cluster = create_commands.add_parser(
        "cluster", help="Creates a local Kubernetes cluster"
    )
    cluster.add_argument("--name", default=DEFAULT_CLUSTER_NAME, help="cluster name")
    cluster.add_argument(
        f"--{CONTROL_PLANE_NODES_FLAG}", dest="control_planes", type=int, default=1,
        help="number of control-plane nodes in the cluster",
    )
    cluster.add_argument(
        f"--{WORKER_NODES_FLAG}", dest="workers", type=int, default=0,
        help="number of worker nodes in the cluster",
    )
    cluster.add_argument(
        "--image", required=True,
        help="node docker image to use for booting the cluster",
    )
    _add_bool_flag(cluster, "retain",
                   "retain nodes for debugging when cluster creation fails")
    _add_bool_flag(cluster, "external-etcd",
                   "create an external etcd container and setup kubeadm for using it")
    _add_bool_flag(cluster, "external-load-balancer",
                   "add an external load balancer to the cluster")
    cluster.add_argument(
        "--volume", dest="volumes", action=_SliceAppend, default=[],
        help="mount a volume on node containers",
    )
    cluster.set_defaults(handler=_run_create_cluster)

    get = commands.add_parser(
        "get", help="Gets one of [clusters, nodes, kubeconfig-path, artifacts]"
    )
    get.set_defaults(help_parser=get)
    get_commands = get.add_subparsers(dest="get_command")
    artifacts = get_commands.add_parser(
        "artifacts",
        aliases=["build-artifacts", "release-artifacts", "ci-artifacts"],
        help="Gets ci/release artifacts for a given Kubernetes version",
    )
    artifacts.add_argument("src", metavar="KUBERNETES_VERSION")
    artifacts.add_argument("dst", metavar="DESTINATION_PATH", nargs="?", default="")
    _add_bool_flag(artifacts, ONLY_KUBEADM_FLAG,
                   "Gets only the kubeadm binary (instead of all artifacts)")
    _add_bool_flag(artifacts, ONLY_KUBELET_FLAG,
                   "Gets only the kubelet binary (instead of all artifacts)")
    _add_bool_flag(artifacts, ONLY_BINARIES_FLAG,
                   "Gets only the kubeadm, kubelet, kubectl binaries")
    _add_bool_flag(artifacts, ONLY_IMAGES_FLAG,
                   "Gets only the control-plane and kube-proxy image tarballs")
    artifacts.set_defaults(handler=_run_get_artifacts)

    return parser


def _configure_logging(level_name: str) -> None:
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(message)s", "%H:%M:%S")
        )
        log.addHandler(handler)
    try:
        level = parse_log_level(level_name)
    except ValueError:
        level = _LOG_LEVELS[DEFAULT_LOG_LEVEL]
        log.setLevel(level)
        log.warning(
            "Invalid log level '%s', defaulting to '%s'", level_name, DEFAULT_LOG_LEVEL
        )
        return
    log.setLevel(level)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the kinder command line; return an exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    except SystemExit as exit_:
        return 0 if exit_.code in (0, None) else 1

    _configure_logging(args.loglevel)

    if args.handler is None:
        args.help_parser.print_help()
        return 0
    try:
        output = args.handler(args)
    except CommandError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    if output is not None:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())