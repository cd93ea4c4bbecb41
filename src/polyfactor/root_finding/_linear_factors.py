"""Batched linear factors."""

from tensordict import tensorclass
from torch import Tensor


@tensorclass
class LinearFactors:
    """Batch of degree-one factors ``scale * x + root``.

    Attributes
    ----------
    scale : Tensor
        Coefficients of ``x``, real, shape (..., d).
    root : Tensor
        Constant terms, complex, shape (..., d).

    Examples
    --------
    Factors of ``(x - 3)(x + 2)``:
        LinearFactors(
            scale=torch.ones(2, dtype=torch.float64),
            root=torch.tensor([-3.0 + 0j, 2.0 + 0j]),
            batch_size=[2],
        )
    """

    scale: Tensor
    root: Tensor

    def zeros(self) -> Tensor:
        """Values of ``x`` where each factor vanishes, ``-root / scale``."""
        return -self.root / self.scale
