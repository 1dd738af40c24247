"""
Test suite for Mail Clusters.

This package contains all tests organized by component:
- test_algorithms/: Tests for tokenization, vectorization, k-means and naming
- test_services/: Tests for the email clustering service
"""
