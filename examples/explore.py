from finpartord.core import make_order, StructuralViolation

order = make_order("dag")
order = order.add("socks", "shoes")
order = order.add("trousers", "shoes")
order = order.add("underwear", "trousers")

print(order)
print(order.le("underwear", "shoes"))
print(order.le("socks", "trousers"))

# Try an edge on a snapshot and throw it away if it does not fit
attempt = order.copy()
try:
    attempt = attempt.add("shoes", "underwear")
except StructuralViolation as e:
    print(e)
print(order)
