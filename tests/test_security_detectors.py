"""
Security Detector Tests
=======================

Covers:
  - SEC_SQL_INJECTION_001: SQL verbs in string concatenation
  - SEC_HARDCODED_SECRET_001: secret-looking literals in assignments/declarations
  - SEC_SWALLOWED_EXCEPTION_001: catch (Exception) without log or rethrow
  - SEC_UNSAFE_FILE_OP_001: destructive file-system calls
  - SEC_WEAK_RANDOM_001: new Random()
"""

from csharp_review.detectors.security import (
    detect_hardcoded_secrets,
    detect_sql_injection,
    detect_swallowed_exceptions,
    detect_unsafe_file_operations,
    detect_weak_random,
)

SQL_MESSAGE = (
    "SECURITY: Potential SQL injection risk detected. "
    "Use parameterized queries instead of string concatenation."
)
WEAK_RANDOM_MESSAGE = (
    "SECURITY: System.Random is not cryptographically secure. "
    "Use RandomNumberGenerator for security-sensitive operations."
)


# ============================================================================
# SEC_SQL_INJECTION_001
# ============================================================================

class TestSqlInjection:

    def test_delete_concatenation(self, parse):
        tree = parse("""
            class Repo
            {
                string Build(string id) { return "DELETE FROM users WHERE id = " + id; }
            }
        """)
        assert detect_sql_injection(tree) == [SQL_MESSAGE]

    def test_reported_once_for_many_concatenations(self, parse):
        tree = parse("""
            class Repo
            {
                void Build(string t, string id)
                {
                    var a = "SELECT * FROM " + t + " WHERE id = " + id;
                    var b = "update " + t + " set x = 1";
                }
            }
        """)
        assert detect_sql_injection(tree) == [SQL_MESSAGE]

    def test_plain_concatenation_is_fine(self, parse):
        tree = parse('class A { string M(string n) { return "Hello, " + n; } }')
        assert detect_sql_injection(tree) == []


# ============================================================================
# SEC_HARDCODED_SECRET_001
# ============================================================================

class TestHardcodedSecrets:

    def test_declared_password(self, parse):
        tree = parse('class A { void M() { string password = "hunter2"; } }')
        assert detect_hardcoded_secrets(tree) == [
            "SECURITY: Hardcoded sensitive data in variable 'password'. Use secure configuration."
        ]

    def test_each_declarator_reported(self, parse):
        tree = parse("""
            class A
            {
                private string ApiKey = "abc";
                private string clientSecret = "def";
            }
        """)
        assert len(detect_hardcoded_secrets(tree)) == 2

    def test_assignment_stops_the_scan(self, parse):
        tree = parse("""
            class A
            {
                string connectionString;
                string password;
                void M()
                {
                    connectionString = "Server=x;Password=y";
                    password = "again";
                }
            }
        """)
        assert detect_hardcoded_secrets(tree) == [
            "SECURITY: Hardcoded sensitive data detected. Use secure configuration instead."
        ]

    def test_non_literal_value_is_fine(self, parse):
        tree = parse('class A { void M() { string password = System.Environment.GetEnvironmentVariable("PW"); } }')
        assert detect_hardcoded_secrets(tree) == []

    def test_unrelated_name_is_fine(self, parse):
        tree = parse('class A { void M() { string greeting = "hi"; } }')
        assert detect_hardcoded_secrets(tree) == []


# ============================================================================
# SEC_SWALLOWED_EXCEPTION_001
# ============================================================================

class TestSwallowedExceptions:

    MESSAGE = (
        "SECURITY: Catching general Exception without logging or rethrowing "
        "can hide security issues."
    )

    def test_empty_catch(self, parse):
        tree = parse("""
            class A
            {
                void M()
                {
                    try { Work(); }
                    catch (Exception ex) { }
                }
                void Work() { }
            }
        """)
        assert detect_swallowed_exceptions(tree) == [self.MESSAGE]

    def test_logged_catch_is_fine(self, parse):
        tree = parse("""
            class A
            {
                void M()
                {
                    try { Work(); }
                    catch (Exception ex) { _logger.LogError(ex, "failed"); }
                }
                void Work() { }
            }
        """)
        assert detect_swallowed_exceptions(tree) == []

    def test_rethrow_is_fine(self, parse):
        tree = parse("""
            class A
            {
                void M()
                {
                    try { Work(); }
                    catch (Exception) { Cleanup(); throw; }
                }
                void Work() { }
                void Cleanup() { }
            }
        """)
        assert detect_swallowed_exceptions(tree) == []

    def test_specific_exception_is_fine(self, parse):
        tree = parse("""
            class A
            {
                void M()
                {
                    try { Work(); }
                    catch (InvalidOperationException) { }
                }
                void Work() { }
            }
        """)
        assert detect_swallowed_exceptions(tree) == []


# ============================================================================
# SEC_UNSAFE_FILE_OP_001
# ============================================================================

class TestUnsafeFileOperations:

    def test_first_operation_is_named(self, parse):
        tree = parse("""
            class A
            {
                void M(string p, string q)
                {
                    File.Delete(p);
                    Directory.Delete(q);
                }
            }
        """)
        assert detect_unsafe_file_operations(tree) == [
            "SECURITY: File system operation 'File.Delete' detected. Ensure proper path "
            "validation to prevent directory traversal attacks."
        ]

    def test_read_is_fine(self, parse):
        tree = parse('class A { string M(string p) { return File.ReadAllText(p); } }')
        assert detect_unsafe_file_operations(tree) == []


# ============================================================================
# SEC_WEAK_RANDOM_001
# ============================================================================

class TestWeakRandom:

    def test_single_instance(self, parse):
        tree = parse("class A { void M() { Random r = new Random(); } }")
        assert detect_weak_random(tree) == [WEAK_RANDOM_MESSAGE]

    def test_every_instance_reported(self, parse):
        tree = parse("class A { void M() { var a = new Random(1); var b = new Random(2); } }")
        assert detect_weak_random(tree) == [WEAK_RANDOM_MESSAGE, WEAK_RANDOM_MESSAGE]

    def test_secure_generator_is_fine(self, parse):
        tree = parse("class A { void M() { var g = RandomNumberGenerator.Create(); } }")
        assert detect_weak_random(tree) == []
