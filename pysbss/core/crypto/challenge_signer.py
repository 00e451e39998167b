"""Challenge signature using MD5 and SHA-1."""
from Crypto.Hash import MD5, SHA1


class ChallengeSigner:
    """
    Computes the answer to a server challenge.
    
    signature = hex(SHA1(hex(MD5(login + password)) + str(challenge)))
    """
    
    @staticmethod
    def password_digest(login: str, password: str) -> str:
        """First stage: hex MD5 of login concatenated with password."""
        return MD5.new((login + password).encode('utf-8')).hexdigest()
    
    def sign(self, login: str, password: str, challenge: int) -> str:
        """Computes hex signature for challenge."""
        h = SHA1.new()
        h.update(self.password_digest(login, password).encode('ascii'))
        h.update(str(int(challenge)).encode('ascii'))
        return h.hexdigest()


def sign(auth, challenge: int) -> str:
    """
    Signs challenge with the credentials of an AuthRequest.
    
    Args:
        auth: Object with ``login`` and ``password`` attributes
        challenge: Server-issued nonce
        
    Returns:
        Hex-encoded signature
    """
    return ChallengeSigner().sign(auth.login, auth.password, challenge)
