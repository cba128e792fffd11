"""
Pytest configuration for bondpricer tests
Provides common fixtures and a non-interactive matplotlib backend
"""
import os
import sys

import matplotlib
import pytest

matplotlib.use("Agg")

# Add the src directory to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from bondpricer.bonds import BondParams


@pytest.fixture
def semiannual_discount_bond():
    """10Y 5% semi-annual bond priced at a 6% yield"""
    return BondParams(face_value=1000, coupon_rate=0.05, ytm=0.06, years=10, frequency=2)


@pytest.fixture
def annual_par_bond():
    """5Y 4% annual bond priced at a 4% yield"""
    return BondParams(face_value=1000, coupon_rate=0.04, ytm=0.04, years=5, frequency=1)


@pytest.fixture
def zero_coupon_bond():
    """10Y zero coupon bond priced at a 5% yield"""
    return BondParams(face_value=1000, coupon_rate=0.0, ytm=0.05, years=10, frequency=1)
