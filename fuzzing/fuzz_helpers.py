import atheris

LETTER = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


class EnhancedFuzzedDataProvider(atheris.FuzzedDataProvider):
    def ConsumeRandomString(self) -> str:
        return self.ConsumeUnicodeNoSurrogates(
            self.ConsumeIntInRange(0, self.remaining_bytes())
        )

    def ConsumeRemainingBytes(self) -> bytes:
        return self.ConsumeBytes(self.remaining_bytes())

    def ConsumeEncoding(self, max_runs: int = 64, max_count: int = 1000) -> str:
        """Build a well-formed encoding of letters and counts."""
        parts = []
        for _ in range(self.ConsumeIntInRange(0, max_runs)):
            if not self.remaining_bytes():
                break
            parts.append(LETTER[self.ConsumeIntInRange(0, len(LETTER) - 1)])
            if self.ConsumeBool():
                parts.append(str(self.ConsumeIntInRange(0, max_count)))
        return "".join(parts)
