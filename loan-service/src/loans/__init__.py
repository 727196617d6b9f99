"""
loan-service/src/loans

Loan store for the lending demo: a `loan` table queryable by loan type.
"""
