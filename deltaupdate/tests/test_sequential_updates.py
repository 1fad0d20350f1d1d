import copy
import random

from deltaupdate import with_diff, DiffAccumulator, Missing
from deltaupdate.diff_utils import iter_diff_nodes
from deltaupdate.log import CommandFormatError

from .utils import make_source, assert_valid_diff


_keys = ["a", "b", "c", "x", "y", "tom", "alice"]


def resolve(value, path):
    for key in path:
        if not isinstance(value, dict) or key not in value:
            return Missing
        value = value[key]
    return value


def random_value():
    if random.random() < 0.3:
        return {random.choice(_keys): random.randint(0, 3)}
    return random.randint(0, 3)


def random_command():
    path = [random.choice(_keys) for _ in range(random.randint(1, 3))]
    if random.random() < 0.2:
        op = {"$merge": {random.choice(_keys): random.randint(0, 3)}}
    else:
        op = {"$set": random_value()}
    for key in reversed(path):
        op = {key: op}
    return op


def check_net_diff(initial, final, diff):
    assert_valid_diff(diff)
    for path, node in iter_diff_nodes(diff):
        assert resolve(initial, path) == node.old_value
        assert resolve(final, path) == node.new_value


def run_updates(seed, count):
    random.seed(seed)
    source = make_source()
    snapshot = copy.deepcopy(source)
    acc = DiffAccumulator(source)
    value = source
    for _ in range(count):
        try:
            value, diff = with_diff(value, random_command())
        except CommandFormatError:
            # Descent through a scalar
            continue
        acc.add(value, diff)
        check_net_diff(source, value, acc.diff)
    assert source == snapshot
    return acc


def test_sequential_updates_short():
    for seed in range(5):
        run_updates(seed, 10)


def test_sequential_updates_long(slow):
    for seed in range(50):
        acc = run_updates(seed, 200)
        if acc.diff is None:
            assert acc.value == acc.initial
