from learning_backend.auth.passwords import hash_password, verify_password


def test_hash_is_salted_and_never_plaintext() -> None:
    first = hash_password('correct horse')
    second = hash_password('correct horse')

    assert first != second
    assert 'correct horse' not in first
    assert first.startswith('$pbkdf2-sha256$')


def test_verify_password_accepts_only_the_original_password() -> None:
    hashed = hash_password('correct horse')

    assert verify_password('correct horse', hashed)
    assert not verify_password('battery staple', hashed)


def test_verify_password_returns_false_for_malformed_hash() -> None:
    assert not verify_password('anything', 'not-a-hash')
