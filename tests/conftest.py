def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers",
        "slow: long-running sweep, enabled with NOSTRCRYPTO_SLOW_TESTS=1",
    )
