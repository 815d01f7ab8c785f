import logging

from silicon_tvl.price_table import DEFAULT_PRICE_TABLE, PriceTable
from silicon_tvl.processors.gpu_valuation import compute_gpu_valuation


def test_mixed_records_total():
    gpus = [
        {"gpu_type": "RTX 4090"},
        {"gpu_type": "RTX 4090"},
        {"gpu_type": "H100-SXM"},
        {"gpu_type": "unknownGPU"},
    ]

    result = compute_gpu_valuation(gpus)

    assert result.total_usd == 2 * 3500 + 21000 == 28000
    assert result.counts["4090"] == 2
    assert result.counts["H100"] == 1
    assert result.total_gpus == 3
    assert result.unclassified == {"unknownGPU"}


def test_counts_cover_every_label_in_table_order():
    result = compute_gpu_valuation([])

    assert list(result.counts) == list(DEFAULT_PRICE_TABLE.labels)
    assert all(count == 0 for count in result.counts.values())
    assert result.total_usd == 0
    assert result.unclassified == set()


def test_unclassified_types_are_deduplicated():
    gpus = [{"gpu_type": "V100"}, {"gpu_type": "V100"}, {"gpu_type": "T4"}]

    result = compute_gpu_valuation(gpus)

    assert result.unclassified == {"V100", "T4"}
    assert result.total_usd == 0


def test_missing_or_empty_type_contributes_zero():
    gpus = [{"gpu_type": ""}, {"id": 7}, {"gpu_type": None}, {"gpu_type": "5090"}]

    result = compute_gpu_valuation(gpus)

    assert result.total_usd == 5000
    assert result.total_gpus == 1
    assert result.unclassified == {"", "None"}


def test_extra_record_fields_are_ignored():
    gpus = [{"gpu_type": "A5000", "earnings": 12.5, "owner": "0xabc"}]

    assert compute_gpu_valuation(gpus).total_usd == 2000


def test_custom_table():
    table = PriceTable.from_mapping({"L40S": 8000})
    gpus = [{"gpu_type": "NVIDIA L40S"}, {"gpu_type": "RTX 4090"}]

    result = compute_gpu_valuation(gpus, table)

    assert result.counts == {"L40S": 1}
    assert result.total_usd == 8000
    assert result.unclassified == {"RTX 4090"}


def test_logs_uncategorized_types(caplog):
    with caplog.at_level(logging.WARNING):
        compute_gpu_valuation([{"gpu_type": "MI300X"}])

    assert "Uncategorized GPU types" in caplog.text
    assert "MI300X" in caplog.text


def test_non_mapping_records_are_unclassified():
    gpus = [{"gpu_type": "4090"}, None, "H100", 42]

    result = compute_gpu_valuation(gpus)

    assert result.total_usd == 3500
    assert result.total_gpus == 1
    assert result.counts["H100"] == 0
    assert result.unclassified == {"None", "'H100'", "42"}
