"""
Example: declaring record types in code and from a declaration file.

This shows the two ways of getting a record type:
- In code: ``create`` with an optional extension
- From config: ``main`` reading examples/records.yaml
"""

from structfactory import FactoryOptions, RecordRegistry, create, default_registry
from structfactory.cli import main


# =============================================================================
# Example 1: Named type with an extension
# =============================================================================
def customer_extension(builder):
    @builder.method
    def greeting(self):
        return f"Hello {self.name}!"


Customer = create("Customer", "name", "address", "zip", extension=customer_extension)

joe = Customer("Joe Smith", "123 Maple, Anytown NC", 12345)
print(joe.greeting())                   # Hello Joe Smith!
print(joe["name"], joe[0], joe.name)    # same member three ways
print(joe.to_dict())
print(default_registry.get("Customer") is Customer)


# =============================================================================
# Example 2: Queries and deep lookup
# =============================================================================
Address = create("Address", "city", "zip")
Person = create("Person", "name", "address")

ann = Person("Ann", Address("Lyon", "69001"))
print(ann.dig("address", "city"))       # Lyon
print(ann.dig("phone"))                 # None
print(Customer(1, 2, 3).values_at(2, 0))  # [3, 1]


# =============================================================================
# Example 3: Lazy population in an isolated registry
# =============================================================================
registry = RecordRegistry()
Sparse = create("Sparse", "a", "b", "c", registry=registry, options=FactoryOptions(fill_missing=False))

s = Sparse(1)
print(s.size(), s.to_list())            # 1 [1]
s["c"] = 3
print(s.size(), s.to_dict())            # 2 {'a': 1, 'c': 3}


# =============================================================================
# Example 4: Declaration file
# =============================================================================
result = main(config_path="examples/records.yaml", registry=RecordRegistry())
print(result["records"])
