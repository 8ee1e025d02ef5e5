# kinder

Tools for people who work on kubeadm and run local Kubernetes clusters
in containers. The package installs three commands.

## `kinder`

The command line front end (`kinder.cli`). It takes a `--loglevel`
option (`panic`, `fatal`, `error`, `warn`/`warning`, `info`, `debug`,
`trace`; the default is `warning`). An unknown level falls back to
`warning` and logs a warning saying so. `--version` prints the version
and exits.

```
kinder version
kinder create cluster --image kindest/node:latest --control-plane-nodes 3 --worker-nodes 2
kinder get artifacts --only-kubeadm release/stable ./out
```

- `version` prints `kinder version: 0.1.0`.
- `create cluster` accepts `--name` (default `kind`), `--image`
  (required), `--control-plane-nodes` (default 1), `--worker-nodes`
  (default 0), `--retain`, `--external-etcd`,
  `--external-load-balancer` and repeatable, comma separated
  `--volume`. Negative node counts are rejected.
- `get artifacts` (also `build-artifacts`, `release-artifacts`,
  `ci-artifacts`) takes a Kubernetes version and an optional
  destination path. `--only-kubeadm`, `--only-kubelet`,
  `--only-binaries` and `--only-images` exclude one another; setting
  more than one is an error.

`create` or `get` without a subcommand prints that command's help.
Errors are printed to standard error as `Error: ...` and the command
exits with status 1.

The pieces are usable from Python too:

```python
from kinder.cli import check_exclusive_flags, parse_log_level, validate_node_counts, CommandError

parse_log_level("debug")                       # logging.DEBUG
check_exclusive_flags({"only-kubeadm"}, ["only-kubeadm", "only-kubelet"])  # True
validate_node_counts(1, -1)                    # raises CommandError
```

### What `kinder` does not do

The package holds no cluster manager and no artifact extractor.
`create cluster` and `get artifacts` check their options and then fail
with an error saying that no cluster manager, or no artifact extractor,
is available. There are no commands to delete or export clusters, list
clusters or nodes, copy files, execute commands on nodes, run actions,
or run test workflows and e2e suites.

## `kinder-verify-boilerplate`

Checks that `.go`, `.py` and `.sh` files carry the licence header block
the project expects, with a copyright year of the form `20xx`. Leading
`//` and `#` comment markers are ignored. Files of other types are
reported as skipped. Without arguments the command prints a usage line
and exits with status 1; it also exits with status 1 if any file fails
the check or cannot be read.

```
kinder-verify-boilerplate path/to/file.go other/file.sh
```

In Python:

```python
from kinder.boilerplate import verify_boilerplate, verify_file, BoilerplateError

try:
    verify_boilerplate(text)
except BoilerplateError as err:
    print(err)
```

`verify_file(path)` returns `False` when a file is skipped for its
extension and `True` when it was checked and passed.

## `kinder-entrypoint`

An entrypoint for node containers (`kinder.entrypoint`). It ignores
`SIGCHLD`, waits for `SIGUSR1` and then replaces itself with the
command it was given, keeping the environment. On `SIGRTMIN+3` (signal
37) it exits with status 0 instead. Started without a command it logs
an error and exits with status 1. This lets a container be set up with
`docker exec` before its real init starts.

```
kinder-entrypoint /sbin/init
```

The command must be given as a path; it is not looked up on `PATH`.

## Tests

```
pip install -e .[test]
pytest
```