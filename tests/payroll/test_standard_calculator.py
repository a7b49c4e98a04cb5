from salarybox.payroll.calculator.standard_calculator import StandardPayrollCalculator


def test_standard_calculator_deducts_ten_percent():
    calc = StandardPayrollCalculator()

    assert calc.deductions(50000) == 5000
    assert calc.net_salary(50000) == 45000


def test_standard_calculator_rounds_half_up():
    calc = StandardPayrollCalculator()

    assert calc.deductions(47005) == 4701
    assert calc.deductions(47004) == 4700


def test_net_salary_is_base_minus_deductions():
    calc = StandardPayrollCalculator(rate="0.125")

    for base in (0, 1, 999, 45000, 48001):
        assert calc.net_salary(base) == base - calc.deductions(base)
