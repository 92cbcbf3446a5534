import itertools

import pytest

from nebula_containerz.core.builder import (
    build_start_config,
    cgroup_permissions,
    format_user,
    nano_cpus,
)
from nebula_containerz.errors import InvalidArgumentError
from nebula_containerz.models.options import (
    CPUs,
    Capabilities,
    Device,
    DevicePermission,
    Devices,
    Env,
    HardMemoryLimit,
    Labels,
    Network,
    OptionSet,
    Ports,
    RestartKind,
    RestartPolicy,
    RunAs,
    SoftMemoryLimit,
    Volume,
    Volumes,
)
from nebula_containerz.models.start_config import (
    DeviceMapping,
    MountSpec,
    ResourceLimits,
    RestartPolicySpec,
    StartConfig,
)


def build(command="", *options):
    return build_start_config(command, OptionSet.from_options(options))


def test_empty_request_builds_zero_config():
    assert build() == StartConfig()


@pytest.mark.parametrize(
    "cpus, expected",
    [(1.0, 1_000_000_000), (0.5, 500_000_000), (2, 2_000_000_000), (0.1, 100_000_000), (1.333333333, 1_333_333_333)],
)
def test_nano_cpus(cpus, expected):
    assert nano_cpus(cpus) == expected


def test_cgroup_permissions_full_set():
    assert cgroup_permissions([DevicePermission.READ, DevicePermission.WRITE, DevicePermission.MKNOD]) == "rwm"


def test_cgroup_permissions_every_subset_keeps_fixed_order():
    perms = list(DevicePermission)
    for size in range(len(perms) + 1):
        for subset in itertools.permutations(perms, size):
            rendered = cgroup_permissions(subset)
            assert len(rendered) == len(set(rendered)) == size
            assert rendered == "".join(ch for ch in "rwm" if ch in rendered)


def test_cgroup_permissions_ignores_duplicates():
    assert cgroup_permissions([DevicePermission.WRITE, DevicePermission.READ, DevicePermission.WRITE]) == "rw"


@pytest.mark.parametrize("user, group, expected", [("u", "", "u"), ("u", "g", "u:g")])
def test_format_user(user, group, expected):
    assert format_user(user, group) == expected


def test_ports_expose_and_bind_tcp():
    cfg = build("", Ports(ports={9090: 90, 8080: 80}))
    assert cfg.exposed_ports == ["80/tcp", "90/tcp"]
    assert cfg.port_bindings == {"80/tcp": [8080], "90/tcp": [9090]}


def test_env_sorted_by_key():
    cfg = build("", Env(env={"ZZ": "1", "AA": "BB", "MM": "x=y"}))
    assert cfg.env == ["AA=BB", "MM=x=y", "ZZ=1"]


def test_run_as():
    assert build("", RunAs(user="u")).user == "u"
    assert build("", RunAs(user="u", group="g")).user == "u:g"


@pytest.mark.parametrize(
    "kind, name",
    [
        (RestartKind.NONE, "no"),
        (RestartKind.ALWAYS, "always"),
        (RestartKind.ON_FAILURE, "on-failure"),
        (RestartKind.UNLESS_STOPPED, "unless-stopped"),
    ],
)
def test_restart_policy_names(kind, name):
    cfg = build("", RestartPolicy(policy=kind, attempts=3))
    assert cfg.restart_policy == RestartPolicySpec(name=name, maximum_retry_count=3)


def test_capabilities_keep_order():
    cfg = build("", Capabilities(add=["NET_ADMIN", "SYS_TIME"], remove=["MKNOD"]))
    assert cfg.cap_add == ["NET_ADMIN", "SYS_TIME"]
    assert cfg.cap_drop == ["MKNOD"]


def test_network_and_labels():
    cfg = build("", Network(name="mgmt"), Labels(labels={"a": "b"}))
    assert cfg.network_mode == "mgmt"
    assert cfg.labels == {"a": "b"}


def test_volumes_become_volume_mounts():
    cfg = build("", Volumes(volumes=[Volume(name="data", mount_point="/data"), Volume(name="tmp", mount_point="/tmp")]))
    assert cfg.mounts == [
        MountSpec(type="volume", source="data", target="/data"),
        MountSpec(type="volume", source="tmp", target="/tmp"),
    ]


def test_devices():
    cfg = build(
        "",
        Devices(devices=[Device(src_path="/dev/a", dst_path="/dev/b", permissions=[DevicePermission.MKNOD, DevicePermission.READ])]),
    )
    assert cfg.devices == [DeviceMapping(path_on_host="/dev/a", path_in_container="/dev/b", cgroup_permissions="rm")]


def test_resources_pass_through():
    cfg = build("", CPUs(cpus=1.0), SoftMemoryLimit(limit_bytes=1000), HardMemoryLimit(limit_bytes=2000))
    assert cfg.resources == ResourceLimits(nano_cpus=1_000_000_000, memory=2000, memory_reservation=1000)


def test_command_is_tokenized():
    assert build('sh -c "echo 2"').argv == ["sh", "-c", "echo 2"]


@pytest.mark.parametrize("cpus", [float("inf"), float("nan"), -1.0, 1e10])
def test_nano_cpus_rejects_unrepresentable_values(cpus):
    with pytest.raises(InvalidArgumentError, match="invalid cpu count"):
        nano_cpus(cpus)


def test_several_host_ports_bound_to_one_container_port():
    cfg = build("", Ports(ports={9090: 80, 8080: 80}))
    assert cfg.exposed_ports == ["80/tcp"]
    assert cfg.port_bindings == {"80/tcp": [8080, 9090]}


def test_host_network_is_left_to_engine_default():
    assert build("", Network(name="host")).network_mode == ""
