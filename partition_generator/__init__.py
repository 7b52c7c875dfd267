from partition_generator.partitions import Partitions, PartitionView, Inner, OUTER
from partition_generator.partitions import integer_partitions, count_partitions
