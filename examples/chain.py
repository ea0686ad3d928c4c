from finpartord.core import make_order

N = 2000

for backend in ["dag", "pairs"]:
    n = N if backend == "dag" else 25
    order = make_order(backend)
    for i in range(n):
        order = order.add(i, i + 1)
    print(backend, len(order), order.le(0, n), order.le(n, 0))
