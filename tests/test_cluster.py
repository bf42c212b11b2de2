from helga.artifact import Artifact
from helga.cluster import Cluster
from helga.errors import ValidationError
from helga.namespace import Namespace
from helga.repo import Repo

password = "password"


def _namespace(name="apps"):
    return Namespace(
        name=name,
        artifact=Artifact(
            decide_by_version=True,
            domain="https://artifacts.example.com",
            username="admin",
            password=password,
            repos=[Repo(name="helm-local", paths=["charts"])],
        ),
    )


def _cluster(**overrides):
    values = dict(
        name="dev",
        server="https://dev.example.com:6443",
        username="admin",
        password=password,
        namespaces=[_namespace()],
    )
    values.update(overrides)
    return Cluster(**values)


def test_from_dict_reads_namespaces():
    cluster = Cluster.from_dict(
        {"name": "dev", "server": "dev.example.com", "username": "admin",
         "password": "password", "namespaces": [{"name": "apps"}, {"name": "jobs"}]}
    )
    assert cluster.name == "dev"
    assert cluster.server == "dev.example.com"
    assert [n.name for n in cluster.namespaces] == ["apps", "jobs"]


def test_validate_valid_cluster():
    assert _cluster().validate() == []


def test_validate_reports_every_problem():
    errors = Cluster(server="bad server").validate()
    assert len(errors) == 5
    assert all(isinstance(e, ValidationError) for e in errors)
    assert any("namespaces list cannot be empty" in str(e) for e in errors)
    assert any("server: bad server" in str(e) for e in errors)


def test_validate_drops_invalid_namespaces():
    good = _namespace("apps")
    cluster = _cluster(namespaces=[good, _namespace("")])
    assert cluster.validate() == []
    assert cluster.namespaces == [good]


def test_validate_all_namespaces_invalid():
    cluster = _cluster(namespaces=[_namespace("")])
    errors = cluster.validate()
    assert cluster.namespaces == []
    assert len(errors) == 1
    assert "namespaces list cannot be empty" in str(errors[0])