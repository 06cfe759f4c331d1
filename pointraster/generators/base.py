# pointraster/generators/base.py
def check_count(count):
    count = int(count)
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    return count


class PointGenerator:
    def generate(self):
        """
        Returns: float64 (N,2) array of x,y points
        """
        raise NotImplementedError
