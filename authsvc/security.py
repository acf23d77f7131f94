"""安全模块：密码哈希与校验

- 使用 Passlib 管理密码哈希，只采用 bcrypt，成本因子固定。
- 对于 bcrypt 的 72 字节限制，哈希和校验前都会做相同的截断，避免运行时错误。
"""

from passlib.context import CryptContext

from .config.settings import settings

BCRYPT_MAX_BYTES = 72


def _truncate(password: str) -> str:
    pw_bytes = password.encode("utf-8")
    if len(pw_bytes) > BCRYPT_MAX_BYTES:
        return pw_bytes[:BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore")
    return password


class PasswordHasher:
    """带盐的自适应密码哈希，成本因子在构造时固定"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self.context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """对明文密码进行哈希并返回哈希字符串"""
        return self.context.hash(_truncate(password))

    def verify(self, password: str, hashed: str) -> bool:
        """验证明文密码与哈希是否匹配；无法识别的哈希视为验证失败。"""
        try:
            return self.context.verify(_truncate(password), hashed)
        except (ValueError, TypeError):
            return False

    def dummy_verify(self) -> None:
        """对不存在的用户执行一次等价耗时的校验"""
        self.context.dummy_verify()


# 进程级默认实例
pwd_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
