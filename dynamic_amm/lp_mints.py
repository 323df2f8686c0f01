"""Pools and vaults whose LP mint is not derived from a program address."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from dynamic_amm.pubkey import Pubkey


def _table(pairs: Iterable[tuple[str, str]]) -> Mapping[Pubkey, Pubkey]:
    return MappingProxyType(
        {Pubkey.from_base58(key): Pubkey.from_base58(value) for key, value in pairs}
    )


POOL_WITH_NON_PDA_BASED_LP_MINT: Mapping[Pubkey, Pubkey] = _table(
    [
        ("H49XALURUKbXRysVXYvHKsd5h4TRbZA2iq9kChVi1JvF", "3GgCMTyddNhZd29rKLLfQ86wQcer1CcksEgvYpraF2UH"),
        ("HcjZvfeSNJbNkfLD4eEcRBr96AD3w1GpmMppaeRZf7ur", "B2uEs9zjnz222hfUaUuRgesryUEYwy3JGuWe31sE9gsG"),
        ("7EJSgV2pthhDfb4UiER9vzTqe2eojei9GEQAQnkqJ96e", "9Gpvqcua3hLps1AhtTSVEFSgKG2Dni6yLyXtEeZGLR3y"),
        ("486t886mRYmo29uubn59PND69ApSbn9ukeLeL2aemLAS", "BNqkJsPE1GraPokMMQXoVaZSoAjL1RTNwDcdmsfcjqf4"),
        ("Aw1MJ31SHEEYmzg9vE4bXa5ZURS5HDvMZjhXmt7Tu8yJ", "CVLS1XdDzNBVnQGwhLG5fz3mUur4Zb1KvUbAUa3SJEZN"),
        ("pvgGDMNpxapbVM8YNao5f6i6mioMzZBHjzDeEcYf9iZ", "FdpRVskpa3uR8CR7ggLs7RjpVH1iF5kog6maKTHcTqK1"),
        ("5fMmLVAtAtMjaXtAWtHPQT83trtDx7kxmgcgJkVPny1K", "Bpa1RdNV7ScuaPdVVosQ2UCcHbpr4b9KWQvXJGGKCJ3F"),
        ("6ZLKLjMd2KzH7PPHCXUPgbMAtdTT37VgTtdeXWLoJppr", "3mtMyBrCf48tJ1XmMnoYZgQqqn6VNEYAfKHzGZnfAZPt"),
        ("Gyv8znLzPb44XatDar8ebx1zG6VvvuPHtaJP8MdCjNoQ", "FmQSveFkR6Z2hbkA5WDNwLdo4xdsS1C8gR5bCu8Zpdsu"),
        ("2X2my7iZEKE7BgqfRVC2a5c5VxekZa2HxGctHyoXxe2m", "GX9SZ81En5uSDB5PTL9AAfKfKuqVHiBYJMY5wsex4Zu4"),
        ("5NLrRmfjaBHj2DpGNihVis6yVv236P8m5AdR838vGMWK", "mXZy4YFSKWZ3BdnHjbG9NJknL2PcmAXxF2neUDoFcNq"),
        ("5kYoik2SHAQxtK82jeHfkwTb1UrStJJUqBteXcU5csP8", "B1J8bDBxoUXWk6hpdbcLDw1WQFeBUuiFMyJFwpnxujmp"),
        ("HCuxikDxMaSvJHoWVy2WaJyvZ5SPnFYZQhRDmtonHrv2", "2jWz3vZzCTxLsPjGsuQLLY9hB7RKtA8KiwtBJziqJz9v"),
        ("4xqyRGWMRkfVo7GH74aryKjSLcpQiVHGAZY4u1n6wAbZ", "36F4LM4tK5xSteQnv7DGjkgoyeb7iWjzwGwmxiEUixPC"),
        ("EdCfPu6685kto9w9xJnwyAsrB1xPVcAzLzyVNW9EwdQS", "9i6M6o2NCqUG8jinGrqKb6w172YfX5KBVPFSsSnv1ZXi"),
        ("5yuefgbJJpmFNK2iiYbLSpv1aZXq7F9AUKkZKErTYCvs", "4x76pkvNJYy9YRZM6Y6RZXJckRpsHQEWoD6sM9HEpmB"),
        ("5NQTw1WqVEt6wP1LmohsrYDyJp2NDipdv6eULVNByXMb", "472wjciN9cdAdMAWA3aQXBqTeoX6UV1ahTVELdrcncD2"),
        ("32D4zRxNc1EssbJieVHfPhZM3rH6CzfUPrWUuWxD9prG", "xLebAypjbaQ9tmxUKHV6DZU4mY8ATAAP2sfkNNQLXjf"),
        ("9CopBY6iQBaZKAhhQANfy7g4VXZkx9zKm8AisPd5Ufay", "48w8Bdsz15PzFLuow9bvo3HQWZW4bxdivvpRoTRc3prg"),
        ("RBtHAB7TS7EDaGVRQHDG6AzK5whz1pQtMiXtrMa5Srn", "DkcS27SzJ4sN94eS3Y84u6QPLJ3LM3RfmfDM7NVnwee1"),
        ("3y6k8aeJxeRX7i3mYtd8G12oqzko1wdjxLJ91roJRnsP", "8TEL6fscLwefNbCEKdCNBuVUSSD9JX6aZ6hSP1oqqiY6"),
    ]
)

DEVNET_POOL_WITH_NON_PDA_BASED_LP_MINT: Mapping[Pubkey, Pubkey] = _table(
    [
        ("GXy2cEDWFodXuXpEZZizVzcyiqF2QZCiMqfZX9BGx1vz", "2nqgDcgfTzXJSckrVdqZGFpSfAAUY7NJKhCeikioaP5m"),
        ("2GPECnGQbXgBBPmmLdw8daxu6A1VJUyuHGWPyJH6U56h", "FMnK5dTHUDR9iLvcshaaxnnEtYN1Ly5Gv8e3vccQ8k9K"),
        ("3PSrJVm8CYJ9R1eJUT9iMikjWD6b8xHWp8VGUnMdr5yF", "cu45VVBLEjpwufw4A4FRLmfyckJNwwxmNrf86burdvy"),
        ("FZgdEqq6rwsWnsZ83Ez2pyJqPdPGfDvzYhrbvcboTPtf", "2qWv8R6EBibqTsBCfyiqKaDh3HU8TxwD26cr5zGkFMJs"),
        ("AyRTAzaXPamTMTRG8dny9jqG3EGWte8FrY5g9Ds3Gtr2", "8J65QEAV5c6CREDBpNBYhrKn7zGdoodMj2Nk1mSeUpPz"),
        ("HK7b7P3goViFkSLQ7rTKRemsGa8LKNKt2t9D4buzbxq2", "BJUsjgYod77LrvTpTATwPQwjuk7hHPyNGKYUSVRJmgvN"),
        ("BAHscmu1NncGS7t4rc5gSBPv1UFEMkvLaon1Ahdd5rHi", "3A2DuLdNFyeVFVsumFEVWKFoLaeTryZ4PQSJowD38Le7"),
        ("2rkn2yM4wJcHPV57T8fPWeBksrfSpiNZoEjRgjtxNDEQ", "ENoFQvqrk6LnxRUmPX1cJzHyrsicJCrbZ2WEtGMY9y6N"),
        ("Bgf1Sy5kfeDgib4go4NgzHuZwek8wE8NZus56z6uizzi", "2xSpdNRwDjkx2BJAtdu2zArWybzeEHqPqP1m63tFakNU"),
    ]
)

VAULT_WITH_NON_PDA_BASED_LP_MINT: Mapping[Pubkey, Pubkey] = _table(
    [
        # ACUSD
        ("BFJP6RYDxJa4FmFtBpPDYcrPozjC98CELrXqVL7rGMVW", "5CuhvouXVx6t5XPiyhRkrfgK5omAf8XnqY1ef6CLjw7o"),
        # USH
        ("AzrUPWWyT9ZoAuMTgGHxYCnnWD2veh98FsCcMknVjg3Q", "9MSsSzDKq8VzokicRom6ciYPLhhZf65bCCBQLjnC7jUH"),
        # afUSDC
        ("GGQfASSnFaqPu83jWrL1DMJBJEzG3rdwsDARDGt6Gxmj", "4da9saTYgDs37wRSuS8mnFoiWzSYeRtvSWaFRe8rtkFc"),
        # Bridged USD Coin (Wormhole Ethereum)
        ("GofttAxULhp5NE9faWNngsnDM1iJiL75AJ2AkSaaC2CC", "Bma9RZx1AjNGcojNJpstGe9Wcytxz17YA6rd2Lq1UirT"),
        # PAI
        ("671JaLe2zDgBeXK3UtFHBiid7WFCHAKZTmLqAaQxx7cL", "9NywobBSCyntrPSZxEZpUbJXLfgUzKbUF2ZqBBkJLEgB"),
        # UXD
        ("2dH3aSpt5aEwhoeSaThKRNtNppEpg2DhGKGa1C5Wecc1", "Afe5fiLmbKw7aBi1VgWZb9hEY8nRYtib6LNr5RGUJibP"),
        # WAVAX
        ("BVJACEffKRHvKbQT9VfEqoxrUWJN2UVdonTKYB2c4MgK", "FFmYsMk5xQq3zQf1r4A6Yyf3kaKd3LUQokeVa776rKWH"),
        # USDT
        ("5XCP3oD3JAuQyDpfBFFVUxsBxNjPQojpKuL4aVhHsDok", "EZun6G5514FeqYtUv26cBHWLqXjAEdjGuoX6ThBpBtKj"),
        # WBTC
        ("mPWBpKzzchEjitz7x4Q2d7cbQ3fHibF2BHWbWk8YGnH", "4nCGSVN8ZGuewX36TznzisceaNYzURWPesxyGtDvA2iP"),
        # mSOL
        ("8p1VKP45hhqq5iZG5fNGoi7ucme8nFLeChoDWNy7rWFm", "21bR3D4QR4GzopVco44PVMBXwHFpSYrbrdeNwdKk7umb"),
        # stSOL
        ("CGY4XQq8U4VAJpbkaFPHZeXpW3o4KQ5LowVsn6hnMwKe", "28KR3goEditLnzBZShRk2H7xvgzc176EoFwMogjdfSkn"),
        # wSOL
        ("FERjPVNEa7Udq8CEv68h6tPL46Tq7ieE49HrE2wea3XT", "FZN7QZ8ZUUAxMPfxYEYkH3cXUASzH8EqA6B4tyCL8f1j"),
        # USDC
        ("3ESUFCnRNgZ7Mn2mPPUMmXYaKU8jpnV9VtA17M7t2mHQ", "3RpEekjLE5cdcG15YcXJUpxSepemvq2FpmMcgo342BwC"),
    ]
)

DEVNET_VAULT_WITH_NON_PDA_BASED_LP_MINT: Mapping[Pubkey, Pubkey] = _table(
    [
        ("2u9ycJ7KEiWeR9vUhaHnohi5RdP2uLwuS1o8LynxhNBa", "DDrvEcscZagpLE361HqpaiTiwyTtyNnWPhE8xKuqgXKY"),
        ("sr5nfQgnAmn2bTkxmpPSQS1iEDGN4Bnk48xxcEAqUsi", "3UhvDzg4dYtgE69QzjPaH94CoTJbLkczmYJWhq1P3MqC"),
        ("G5qooe1TGxzsNCefw1xycto4SNy7H4Ad2AiPTCUJnM8W", "C1XV8Wd4zdDAy3VTGd6GBJn3KYkSE8MwNyFrPQUEW9py"),
        ("2FiYEM3EVtUNj6soptXZJdxjBjNWHtUUUKh79QaywYRg", "Dq6j7SuMPhHh4eajA8WS1Nby9sbNynJfxyM3p7vxes9f"),
        ("ATeQUJkKFRiWUfV76k5P5TfAyXwjWgBdck54z2sGvuNK", "BgPb3pzLMmSwECCPjTHoKLYQR3iirXBw3bVgF8ZaR7sc"),
        ("FERjPVNEa7Udq8CEv68h6tPL46Tq7ieE49HrE2wea3XT", "BvoAjwEDhpLzs3jtu4H72j96ShKT5rvZE9RP1vgpfSM"),
        ("8p1VKP45hhqq5iZG5fNGoi7ucme8nFLeChoDWNy7rWFm", "8YE7s4oCbsEUzH71hVwe9DBCyemprwAjyDzksZ8d9bPz"),
        ("4cX1amsBFy9by77uPuTbhN9Qw3oEaMu4J3pAyPa2gmku", "2iGUnZPUPgjpjG6rT5Fi4VEeMoFw9DAwMJ8UFjXDpVs1"),
        ("9Fze2yguDHYvX1KVfj1rgA9Q5moboWQFkw67wLGc61Z8", "CNJoMWip1hX5mq2zHQ88LeC5gGMrVbGdQ9ZP6jB3qvkn"),
        ("BPNKnFRAi9jfbD4xNAUavZmCbkn9DxGc1FCy4cYWHTXf", "tewho86AFqTGmMvtKEvnNegHZfce4tTzDYENa58TLCq"),
        ("DZwqzesnbNhoP5iPaxQkPG37JfDuqpZBfmsBw2wCpwQ1", "GDK7uxgtQYYnwHwSXE83T6pxiJbKAV2jDMAa3bmc3Qzm"),
        ("CyAd2PPVUCytnCiMztYFqu7v56Df3KiXdrx94rCyWeJz", "HQU6SZNTTReKLXGyyPp9tt9tcBRo75yV9PgPMZavzXRG"),
    ]
)


def get_pool_lp_mint_override(pool_key: Pubkey, devnet: bool = False) -> Optional[Pubkey]:
    """LP mint of a pool whose mint is not a program-derived address, if any."""
    table = DEVNET_POOL_WITH_NON_PDA_BASED_LP_MINT if devnet else POOL_WITH_NON_PDA_BASED_LP_MINT
    return table.get(pool_key)


def get_vault_lp_mint_override(vault_key: Pubkey, devnet: bool = False) -> Optional[Pubkey]:
    """LP mint of a vault whose mint is not a program-derived address, if any."""
    table = (
        DEVNET_VAULT_WITH_NON_PDA_BASED_LP_MINT if devnet else VAULT_WITH_NON_PDA_BASED_LP_MINT
    )
    return table.get(vault_key)