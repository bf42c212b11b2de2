# helga

helga reads a YAML description of your clusters, their namespaces and the
Artifactory repositories that feed them, and checks it. As a library it can
also ask Artifactory, through AQL, which Helm chart packages are available and
keep only the newest one of each chart.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

helga takes its settings from the environment:

- `HELGA_CONF_FILE_PATH` – path of the YAML configuration file.
- `LOGS_FILE_PATH` – file the log is appended to, as JSON lines. Log records
  are also written to standard output as `time=... level=... msg=...` lines.
  If the file cannot be opened, a message is printed and logging goes to
  standard output only.

```
export HELGA_CONF_FILE_PATH=helga_conf_example.yaml
export LOGS_FILE_PATH=./helga.log
helga
```

The command loads the configuration, fills in every namespace's artifact
settings from the global ones, validates the result and logs every problem it
finds. It exits with status 1 when the configuration cannot be read or parsed
(`ConfigLoadingError`) or is not valid (`ConfigNotValidError`), and 0
otherwise. It closes the log file before it returns.

## What the command does not do

The `helga` command only loads and validates the configuration. It does not
query Artifactory, contact the clusters or deploy any chart; package lookup is
available only through the library calls described below.

## Configuration

```yaml
global:
  cluster:
    name: main
    server: https://cluster.example.com:6443
    username: deployer
    password: password
  artifact:
    domain: https://artifacts.example.com
    username: reader
    password: password
    decideByVersion: true
    repos:
      - name: helm-local
        paths: [charts/stable]

clusters:
  - name: production
    server: https://prod.example.com:6443
    username: deployer
    password: password
    namespaces:
      - name: web
        artifact:
          repos:
            - name: helm-local
              paths: [charts/web]
```

Validation rules:

- A domain or server must look like `host`, `host:port` or
  `http(s)://host[:port]` (see `helga.settings.is_valid_domain`).
- Cluster names, users and passwords must not be empty; namespace and repo
  names must not be empty; every repository needs at least one path.
- Each cluster must keep at least one valid namespace, each namespace artifact
  at least one valid repo, and the configuration at least one valid cluster.
  Invalid entries are dropped and logged.
- `global.artifact` must have a valid domain, and `global.cluster` a name, a
  valid server, a username and a password. Invalid global repos are dropped.

Filling in from `global.artifact`: when a namespace's artifact has no
`domain`, its domain, username and password are taken from the global
artifact; `decideByVersion` is taken when the namespace leaves it unset.
Repositories of the same name are merged, keeping every path once; repos that
exist only in the global artifact are added.

Choosing between two builds of the same chart: the one with the higher
semantic version wins. Unless `decideByVersion` is `true`, a more recently
modified package also wins. Package names are split at their last `-` into
chart name and version.

## Using it as a library

```python
from helga.config import load_config
from helga.errors import HelgaError

try:
    config = load_config("helga_conf_example.yaml")
except HelgaError as err:
    print(err)
else:
    for cluster in config.clusters:
        for namespace in cluster.namespaces:
            for package in namespace.organize_helm_packages():
                print(cluster.name, namespace.name, package.name)
```

`load_config()` without an argument reads the file named by
`HELGA_CONF_FILE_PATH`. The global section is `Config.global_`.

`Artifact.fetch_helm_packages(session=None)` and
`Namespace.organize_helm_packages(session=None)` accept a
`requests.Session`. Responses other than 200 are logged and skipped; a request
that cannot be completed raises `helga.errors.ArtifactoryAPIError`.
`helga.artifact.build_aql_query` returns the AQL query used for one repo path.

`helga.packages.determine_newer_package` and `helga.packages.compare_semver`
are available on their own for comparing chart packages;
`determine_newer_package` raises `PackagesDoNotMatchError` when the chart
names differ.