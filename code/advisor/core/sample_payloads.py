SAMPLE_INPUT = {
    "income": "5000",
    "expenses": {
        "housing": "1200",
        "utilities": "150",
        "food": "400",
        "transportation": "300",
        "entertainment": "200",
        "other": "150",
    },
    "current_savings": "10000",
    "age": "30",
    "risk_tolerance": "moderate",
    "investment_horizon": "5-10",
}
