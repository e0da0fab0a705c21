import pytest

from reprsize import UnknownUnitError, Units


@pytest.mark.parametrize(
    ('unit', 'expected'),
    [
        (Units.Bytes, 1),
        (Units.Kilobytes, 1000),
        (Units.Kibibytes, 1024),
        (Units.Megabytes, 1_000_000),
        (Units.Mebibytes, 1_048_576),
        (Units.Gigabytes, 10**9),
        (Units.Gibibytes, 2**30),
        (Units.Terabytes, 10**12),
        (Units.Tebibytes, 2**40),
        (Units.Petabytes, 10**15),
        (Units.Pebibytes, 2**50),
    ],
)
def test_bytes(unit: Units, expected: int):
    assert unit.bytes == expected


def test_symbols():
    assert [str(x) for x in Units] == [
        'B',
        'kB',
        'KiB',
        'MB',
        'MiB',
        'GB',
        'GiB',
        'TB',
        'TiB',
        'PB',
        'PiB',
    ]


@pytest.mark.parametrize('binary', [False, True])
def test_family_strictly_increasing(binary):
    family = Units.family(binary=binary)
    scales = [x.bytes for x in family]

    assert len(family) == 6
    assert family[0] is Units.Bytes
    assert all(a < b for a, b in zip(scales, scales[1:], strict=False))
    assert all(x.binary == binary for x in family[1:])


def test_family_members():
    assert Units.family()[-1] is Units.Petabytes
    assert Units.family(binary=True)[-1] is Units.Pebibytes
    assert set(Units.family()) | set(Units.family(binary=True)) == set(Units)


@pytest.mark.parametrize(
    ('value', 'expected'),
    [
        ('KiB', Units.Kibibytes),
        ('kB', Units.Kilobytes),
        ('kibibytes', Units.Kibibytes),
        ('MEGABYTES', Units.Megabytes),
        (' B ', Units.Bytes),
    ],
)
def test_parse(value, expected):
    assert Units.parse(value) is expected


@pytest.mark.parametrize('value', ['kb', 'KB', 'exabytes', ''])
def test_parse_unknown(value):
    with pytest.raises(UnknownUnitError):
        Units.parse(value)
