"""Tests for command implementation modules.

Test Files and Coverage:
========================

| Test File          | Test Classes            | Tested Constructs                    | Tested Functionalities                        |
|--------------------|-------------------------|--------------------------------------|-----------------------------------------------|
| test_summarize.py  | SummarizeCommandTest    | do_summarize(), print_summary()      | Output layout, policies, tree, bytes, export  |
"""
