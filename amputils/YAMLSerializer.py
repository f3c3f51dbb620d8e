import yaml

SUMMARY_FILENAME: str = 'bank.yaml'


def dump_bank(bank, path: str) -> None:
  ''' Writes the bank summary, keeping fields in declaration order '''
  with open(path, 'w', encoding='utf-8') as f:
    yaml.dump(bank.to_yaml(), f, sort_keys=False, allow_unicode=True)
